# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


# Demo directory used when DIRECTORY_MODE=static and by the offline mode.
THERAPISTS = [
    {
        "id": 1,
        "name": "Dr. Sarah Mitchell",
        "specialty": "Anxiety & Depression",
        "tags": ["Anxiety", "Depression", "CBT", "Panic Disorders"],
        "rating": 4.9,
        "location": "Manhattan, New York, NY",
        "coordinates": {"lat": 40.7831, "lng": -73.9712},
        "insurance": ["Aetna", "BlueCross", "Cigna"],
        "gender": "female",
        "languages": ["English"],
        "experience": 12,
        "price": 150,
        "phone": "(212) 555-0147",
        "email": "s.mitchell@therapick.example",
        "bio": "Evidence-based care for anxiety and mood disorders.",
    },
    {
        "id": 2,
        "name": "Dr. James Chen",
        "specialty": "Trauma & PTSD",
        "tags": ["Trauma Therapy", "PTSD", "EMDR", "Grief Counseling"],
        "rating": 4.8,
        "location": "Brooklyn, New York, NY",
        "coordinates": {"lat": 40.6782, "lng": -73.9442},
        "insurance": ["UnitedHealthcare", "Aetna"],
        "gender": "male",
        "languages": ["English", "Mandarin"],
        "experience": 15,
        "price": 175,
        "phone": "(718) 555-0192",
        "email": "j.chen@therapick.example",
        "bio": "Trauma-informed therapist trained in EMDR.",
    },
    {
        "id": 3,
        "name": "Maria Rodriguez, LMFT",
        "specialty": "Relationships",
        "tags": ["Relationship Therapy", "Couples Counseling", "Conflict Resolution"],
        "rating": 4.7,
        "location": "Queens, New York, NY",
        "coordinates": {"lat": 40.7282, "lng": -73.7949},
        "insurance": ["Cigna", "Medicaid"],
        "gender": "female",
        "languages": ["English", "Spanish"],
        "experience": 9,
        "price": 130,
        "phone": "(718) 555-0133",
        "email": "m.rodriguez@therapick.example",
        "bio": "Helping couples and individuals rebuild connection.",
    },
    {
        "id": 4,
        "name": "Dr. Aisha Patel",
        "specialty": "Stress & Burnout",
        "tags": ["Stress Management", "Work-Life Balance", "Mindfulness"],
        "rating": 4.6,
        "location": "Jersey City, NJ",
        "coordinates": {"lat": 40.7178, "lng": -74.0431},
        "insurance": ["BlueCross", "UnitedHealthcare"],
        "gender": "female",
        "languages": ["English", "Hindi"],
        "experience": 8,
        "price": 140,
        "phone": "(201) 555-0178",
        "email": "a.patel@therapick.example",
        "bio": "Mindfulness-based approaches for work stress.",
    },
    {
        "id": 5,
        "name": "Marcus Johnson, LCSW",
        "specialty": "Anger & Emotional Regulation",
        "tags": ["Anger Management", "Emotional Regulation", "DBT"],
        "rating": 4.5,
        "location": "Bronx, New York, NY",
        "coordinates": {"lat": 40.8448, "lng": -73.8648},
        "insurance": ["Medicaid", "Aetna"],
        "gender": "male",
        "languages": ["English"],
        "experience": 11,
        "price": 120,
        "phone": "(718) 555-0110",
        "email": "m.johnson@therapick.example",
        "bio": "Practical tools for managing anger and frustration.",
    },
    {
        "id": 6,
        "name": "Dr. Emily Park",
        "specialty": "Life Transitions",
        "tags": ["Life Coaching", "Career Counseling", "Identity Exploration"],
        "rating": 4.8,
        "location": "Hoboken, NJ",
        "coordinates": {"lat": 40.7440, "lng": -74.0324},
        "insurance": ["Cigna"],
        "gender": "female",
        "languages": ["English", "Korean"],
        "experience": 7,
        "price": 160,
        "phone": "(201) 555-0165",
        "email": "e.park@therapick.example",
        "bio": "Guidance through career changes and identity questions.",
    },
    {
        "id": 7,
        "name": "David Okafor, LMHC",
        "specialty": "Loneliness & Social Skills",
        "tags": ["Social Skills", "Connection Building", "Depression Screening"],
        "rating": 4.4,
        "location": "Online only",
        "coordinates": None,
        "insurance": ["UnitedHealthcare"],
        "gender": "male",
        "languages": ["English", "French"],
        "experience": 5,
        "price": 100,
        "phone": "(646) 555-0121",
        "email": "d.okafor@therapick.example",
        "bio": "Telehealth sessions focused on building connection.",
    },
    {
        "id": 8,
        "name": "Dr. Rachel Green",
        "specialty": "Mood Disorders",
        "tags": ["Mood Disorders", "Bipolar Disorder", "Medication Management"],
        "rating": 4.9,
        "location": "Staten Island, New York, NY",
        "coordinates": {"lat": 40.5795, "lng": -74.1502},
        "insurance": ["Aetna", "BlueCross"],
        "gender": "female",
        "languages": ["English"],
        "experience": 20,
        "price": 200,
        "phone": "(718) 555-0188",
        "email": "r.green@therapick.example",
        "bio": "Psychiatric care for complex mood conditions.",
    },
]

REVIEWS = {
    1: [
        {"id": 101, "userName": "Anna K.", "rating": 5, "date": "2025-01-12",
         "text": "Helped me get my panic attacks under control.", "helpful": 14},
        {"id": 102, "userName": "Tom B.", "rating": 5, "date": "2024-11-03",
         "text": "Warm, practical and very knowledgeable.", "helpful": 6},
    ],
    2: [
        {"id": 201, "userName": "Priya S.", "rating": 5, "date": "2025-02-20",
         "text": "EMDR with Dr. Chen changed my life.", "helpful": 21},
    ],
    3: [
        {"id": 301, "userName": "Luis M.", "rating": 4, "date": "2024-12-08",
         "text": "Our communication has improved a lot.", "helpful": 3},
    ],
}
