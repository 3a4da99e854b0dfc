# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from therapick.models import database
from therapick.models import *  # registers all models

from therapick.routers import auth_router
from therapick.routers import therapist_router
from therapick.routers import appointment_router
from therapick.routers import mood_router
from therapick.routers import saved_therapist_router
from therapick.routers import healthz_router

from therapick.utils.rate_limit_utils import limiter
from therapick.utils.responses import register_exception_handlers

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create DB tables in one go
    database.Base.metadata.create_all(bind=database.engine)
    logger.info("✅ Database tables ready")
    yield


# Create FastAPI app with lifespan
app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Therapick API",
    description="Mood-based therapist matching, bookings and mood journal",
    version="1.0"
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# --- CORS (allow the deployed frontend origin if provided) ---
frontend_origin = os.getenv("FRONTEND_ORIGIN")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[frontend_origin] if frontend_origin else ["*"],
    allow_credentials=bool(frontend_origin),
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth_router.router)
app.include_router(therapist_router.router)
app.include_router(appointment_router.router)
app.include_router(mood_router.router)
app.include_router(saved_therapist_router.router)
app.include_router(healthz_router.router)


@app.get("/")
def read_root():
    return {"message": "Welcome to Therapick - therapist matching backend Live"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
