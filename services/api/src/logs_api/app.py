from dotenv import load_dotenv
from pathlib import Path

# Always load the .env from services/api/.env even if cwd changes
load_dotenv(dotenv_path=Path(__file__).resolve().parents[2] / ".env")

from fastapi import FastAPI

from .settings import load_settings
from .routers import logs

app = FastAPI(title="Logs Insights Gateway", version="1.0.0")

settings = load_settings()

app.include_router(logs.router)

@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": "1.0.0",
        "aws_region": settings.aws_region,
        "max_concurrency": settings.max_concurrency,
    }
