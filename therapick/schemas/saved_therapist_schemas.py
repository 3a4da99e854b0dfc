# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel, Field
from typing import Optional, List, Union


class SaveTherapistRequest(BaseModel):
    therapist_id: Optional[Union[str, int]] = Field(None, alias="therapistId")
    moods: Optional[List[str]] = None
    notes: Optional[str] = Field(None, max_length=300)

    # Fallback snapshot when the directory can't be reached
    therapist_name: Optional[str] = Field(None, alias="therapistName")
    therapist_specialty: Optional[str] = Field(None, alias="therapistSpecialty")
    therapist_rating: Optional[float] = Field(None, alias="therapistRating", ge=0, le=5)
    therapist_location: Optional[str] = Field(None, alias="therapistLocation")
