"""
Hiring Metrics Main Application

FastAPI application serving the recruitment dashboard metrics.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import metrics_report_router
from app.core import settings
from app.database_layer import init_db
import logging

logger = logging.getLogger("app_logger")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.APP_NAME} started")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Vacancy status, headline cards and hiring time metrics for the recruitment dashboard",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(metrics_report_router)
