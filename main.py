"""
Content Analyzer Service - Main Application

A FastAPI service that scores website content against the Golden Circle,
Elements of Value and CliftonStrengths frameworks. Claude (Anthropic) is
used when configured; a deterministic keyword analyzer is always the
fallback.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config import settings
from redis_client import close_redis_client
from routes import router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Initialize FastAPI app
app = FastAPI(title="Content Analyzer Service")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all routes from routes.py
app.include_router(router)


@app.on_event("shutdown")
def shutdown():
    close_redis_client()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        timeout_keep_alive=60,
        workers=settings.API_WORKERS,
    )
