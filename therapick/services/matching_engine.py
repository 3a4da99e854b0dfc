# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

"""
Mood-based therapist matching.

Selected moods expand to specialty tags; a therapist matches when any of
its tags contains any specialty (case-insensitive substring). With an
origin, matches are ranked by haversine distance, therapists without
coordinates last.
"""

from typing import Iterable, List, Optional

from therapick.utils.location_utils import haversine_miles
from therapick.utils.mood_mappings_utils import specialties_for

MISSING_DISTANCE = 999


def therapist_matches(therapist: dict, specialties: Iterable[str]) -> bool:
    tags = [str(t).lower() for t in (therapist.get("tags") or [])]
    return any(spec.lower() in tag for spec in specialties for tag in tags)


def filter_by_specialties(directory: Iterable[dict], specialties: List[str]) -> List[dict]:
    if not specialties:
        return []
    return [t for t in directory if therapist_matches(t, specialties)]


def rank_by_distance(therapists: Iterable[dict], origin: Optional[dict]) -> List[dict]:
    """
    Attach `distance` (miles) to copies of each therapist and sort ascending.
    Python's sort is stable, so equal distances keep directory order.
    """
    therapists = list(therapists)
    if not origin:
        return therapists

    ranked = []
    for t in therapists:
        ranked.append({**t, "distance": haversine_miles(origin, t.get("coordinates"))})

    ranked.sort(key=lambda t: MISSING_DISTANCE if t["distance"] is None else t["distance"])
    return ranked


def match(selected_moods: Iterable[str], directory: Iterable[dict], origin: Optional[dict] = None) -> List[dict]:
    specialties = specialties_for(selected_moods)
    matching = filter_by_specialties(directory, specialties)
    return rank_by_distance(matching, origin)
