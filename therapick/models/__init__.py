# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from .user import User
from .appointment import Appointment
from .mood_entry import MoodEntry
from .saved_therapist import SavedTherapist
