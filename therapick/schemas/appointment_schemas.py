# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from pydantic import BaseModel, Field
from typing import Optional, Union


class AppointmentCreateRequest(BaseModel):
    therapist_id: Optional[Union[str, int]] = Field(None, alias="therapistId")
    therapist_name: Optional[str] = Field(None, alias="therapistName")
    therapist_specialty: Optional[str] = Field(None, alias="therapistSpecialty")
    date: Optional[str] = None  # ISO date or datetime
    time: Optional[str] = None  # slot label, e.g. "9:00 AM"
    notes: Optional[str] = Field(None, max_length=500)


class AppointmentUpdateRequest(BaseModel):
    date: Optional[str] = None
    time: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=500)


class AppointmentCancelRequest(BaseModel):
    reason: Optional[str] = Field(None, max_length=200)
