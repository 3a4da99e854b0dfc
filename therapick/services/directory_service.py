# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import logging
import requests
from typing import List, Optional

from therapick.data.demo_therapists import THERAPISTS, REVIEWS
from therapick.services.matching_engine import filter_by_specialties, rank_by_distance
from therapick.utils.errors import AppError, DirectoryUnavailableError

# ---------------------------
# ✅ Logger Setup
# ---------------------------

logger = logging.getLogger(__name__)

# ---------------------------
# ✅ Environment Variables
# ---------------------------

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

THERAPAPI_KEY = os.getenv("THERAPAPI_KEY")
THERAPAPI_BASE_URL = os.getenv("THERAPAPI_BASE_URL", "https://api.therapapi.com/v1")
THERAPAPI_TIMEOUT = float(os.getenv("THERAPAPI_TIMEOUT", "10"))
DIRECTORY_MODE = os.getenv("DIRECTORY_MODE", "remote")

DEFAULT_LOCATION = "New York, NY"
DEFAULT_RADIUS = 25  # miles
DEFAULT_LIMIT = 20


class TherapAPIDirectory:
    """Read-only client for the TherapAPI therapist directory."""

    def __init__(self, base_url: str = THERAPAPI_BASE_URL, api_key: Optional[str] = THERAPAPI_KEY,
                 timeout: float = THERAPAPI_TIMEOUT, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        if api_key:
            self.session.headers["Authorization"] = f"Bearer {api_key}"

    def _get(self, path: str, params: Optional[dict] = None, allow_not_found: bool = False):
        url = f"{self.base_url}{path}"
        try:
            logger.info("🔁 TherapAPI GET %s", path)
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("❌ TherapAPI request to %s failed: %s", path, e)
            raise DirectoryUnavailableError() from e

        if allow_not_found and response.status_code == 404:
            return None

        if response.status_code >= 500:
            logger.error("❌ TherapAPI %s returned %s", path, response.status_code)
            raise DirectoryUnavailableError()

        if response.status_code >= 400:
            raise AppError(self._error_message(response), response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error("❌ TherapAPI %s returned a non-JSON body", path)
            raise DirectoryUnavailableError() from e

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return body["message"]
        return response.reason or "TherapAPI request failed"

    def search(self, specialties: List[str] = None, location: Optional[str] = None,
               latitude: Optional[float] = None, longitude: Optional[float] = None,
               radius: int = DEFAULT_RADIUS, insurance: List[str] = None, gender: Optional[str] = None,
               language: Optional[str] = None, limit: int = DEFAULT_LIMIT, offset: int = 0) -> dict:
        params = {}
        if location:
            params["location"] = location
        if latitude is not None and longitude is not None:
            params["lat"] = latitude
            params["lng"] = longitude
        params["radius"] = radius
        if specialties:
            params["specialties"] = ",".join(specialties)
        if insurance:
            params["insurance"] = ",".join(insurance)
        if gender:
            params["gender"] = gender
        if language:
            params["language"] = language
        params["limit"] = limit
        params["offset"] = offset

        body = self._get("/therapists", params=params) or {}
        therapists = body.get("data") or []

        if latitude is not None and longitude is not None:
            therapists = rank_by_distance(therapists, {"lat": latitude, "lng": longitude})

        return {
            "therapists": therapists,
            "total": body.get("total") or 0,
            "has_more": bool(body.get("hasMore")),
        }

    def get_by_id(self, therapist_id) -> Optional[dict]:
        body = self._get(f"/therapists/{therapist_id}", allow_not_found=True)
        if body is None:
            return None
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    def get_reviews(self, therapist_id) -> list:
        body = self._get(f"/therapists/{therapist_id}/reviews") or {}
        return body.get("data") or []

    def get_specialties(self) -> list:
        body = self._get("/specialties") or {}
        return body.get("data") or []


def _matches_filters(therapist: dict, insurance, gender, language) -> bool:
    if insurance:
        accepted = {i.lower() for i in therapist.get("insurance") or []}
        if not any(i.lower() in accepted for i in insurance):
            return False
    if gender and (therapist.get("gender") or "").lower() != gender.lower():
        return False
    if language:
        spoken = {l.lower() for l in therapist.get("languages") or []}
        if language.lower() not in spoken:
            return False
    return True


class StaticDirectory:
    """In-memory demo directory exposing the same interface as TherapAPIDirectory."""

    def __init__(self, therapists: Optional[List[dict]] = None, reviews: Optional[dict] = None):
        self.therapists = list(THERAPISTS if therapists is None else therapists)
        self.reviews = REVIEWS if reviews is None else reviews

    def search(self, specialties: List[str] = None, location: Optional[str] = None,
               latitude: Optional[float] = None, longitude: Optional[float] = None,
               radius: int = DEFAULT_RADIUS, insurance: List[str] = None, gender: Optional[str] = None,
               language: Optional[str] = None, limit: int = DEFAULT_LIMIT, offset: int = 0) -> dict:
        results = self.therapists
        if specialties:
            results = filter_by_specialties(results, specialties)
        results = [t for t in results if _matches_filters(t, insurance, gender, language)]

        if latitude is not None and longitude is not None:
            results = rank_by_distance(results, {"lat": latitude, "lng": longitude})
            results = [t for t in results if t["distance"] is None or t["distance"] <= radius]

        total = len(results)
        page = results[offset:offset + limit]
        return {
            "therapists": page,
            "total": total,
            "has_more": offset + len(page) < total,
        }

    def get_by_id(self, therapist_id) -> Optional[dict]:
        for t in self.therapists:
            if str(t["id"]) == str(therapist_id):
                return t
        return None

    def get_reviews(self, therapist_id) -> list:
        for key, reviews in self.reviews.items():
            if str(key) == str(therapist_id):
                return reviews
        return []

    def get_specialties(self) -> list:
        seen = []
        for t in self.therapists:
            for tag in t.get("tags") or []:
                if tag not in seen:
                    seen.append(tag)
        return seen


_directory = None


def get_directory():
    """FastAPI dependency returning the configured directory (one per process)."""
    global _directory
    if _directory is None:
        if DIRECTORY_MODE == "static":
            logger.info("✅ Using static demo therapist directory")
            _directory = StaticDirectory()
        else:
            _directory = TherapAPIDirectory()
    return _directory
