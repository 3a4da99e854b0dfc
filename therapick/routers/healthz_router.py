# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from therapick.models.database import SessionLocal
from therapick.services.directory_service import DIRECTORY_MODE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Infra"])


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/healthz")
def deep_health_check():
    result = {
        "db_connection": False,
        "directory_mode": DIRECTORY_MODE,
    }

    db = SessionLocal()
    try:
        # ✅ Check DB read
        db.execute(text("SELECT 1"))
        result["db_connection"] = True
    except SQLAlchemyError as e:
        logger.error("❌ Health check DB query failed: %s", e)
    finally:
        db.close()

    return {
        "status": "ok" if result["db_connection"] else "error",
        "details": result
    }
