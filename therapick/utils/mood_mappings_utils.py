# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from collections import namedtuple

Mood = namedtuple("Mood", ["label", "description", "specialties"])

# Search moods shown on the home screen, in display order
MOODS = [
    Mood("Sad/Depressed", "Feeling down, hopeless, or losing interest",
         ("Depression", "Mood Disorders", "CBT")),
    Mood("Anxious", "Worried, nervous, or panic attacks",
         ("Anxiety", "Panic Disorders", "Stress Management")),
    Mood("Angry/Frustrated", "Anger issues or feeling irritable",
         ("Anger Management", "Emotional Regulation", "Conflict Resolution")),
    Mood("Heartbroken", "Relationship problems or breakup",
         ("Relationship Therapy", "Couples Counseling", "Grief Counseling")),
    Mood("Stressed/Burnout", "Overwhelmed, exhausted, or burnt out",
         ("Stress Management", "Work-Life Balance", "Mindfulness")),
    Mood("Confused/Lost", "Life direction or identity questions",
         ("Life Coaching", "Career Counseling", "Identity Exploration")),
    Mood("Lonely", "Feeling isolated or disconnected",
         ("Social Skills", "Connection Building", "Depression")),
    Mood("Traumatized", "Past trauma or PTSD symptoms",
         ("Trauma Therapy", "PTSD", "EMDR")),
]

MOODS_BY_LABEL = {m.label: m for m in MOODS}

MOOD_SPECIALTY_MAP = {m.label: list(m.specialties) for m in MOODS}


def specialties_for(mood_labels) -> list:
    """Union of specialties for the given mood labels, first-seen order, no duplicates."""
    seen = []
    for label in mood_labels:
        mood = MOODS_BY_LABEL.get(label)
        if not mood:
            continue
        for spec in mood.specialties:
            if spec not in seen:
                seen.append(spec)
    return seen


# Daily journal moods and their scores
JOURNAL_MOOD_SCORES = {
    "great": 5,
    "happy": 4,
    "okay": 3,
    "anxious": 2,
    "sad": 1,
}

JOURNAL_MOODS = list(JOURNAL_MOOD_SCORES)

NEUTRAL_MOOD_SCORE = 3

MOOD_TRIGGERS = ["work", "relationships", "health", "financial", "family", "other"]

MOOD_ACTIVITIES = ["exercise", "meditation", "therapy", "socializing", "hobbies", "rest", "other"]
