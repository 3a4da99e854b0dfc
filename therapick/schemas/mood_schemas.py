# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel, Field
from typing import Optional, List


class MoodLogRequest(BaseModel):
    date: Optional[str] = None
    mood: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=300)
    triggers: Optional[List[str]] = None
    activities: Optional[List[str]] = None
