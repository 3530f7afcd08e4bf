import logging

from fastapi import FastAPI

from app.api.routes.parse import router as parse_router
from app.core.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Resume Extractor",
    description="Deterministic, heuristic extraction of candidate name, skills, experience, education, contact info and work history from plain-text resumes",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-extractor", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
