# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from therapick.auth import get_current_user
from therapick.models.database import get_db
from therapick.models.user import User
from therapick.schemas.appointment_schemas import (
    AppointmentCreateRequest,
    AppointmentUpdateRequest,
    AppointmentCancelRequest,
)
from therapick.services import appointment_service
from therapick.utils.responses import success_response

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


@router.post("")
def create_appointment(payload: AppointmentCreateRequest, user: User = Depends(get_current_user),
                       db: Session = Depends(get_db)):
    appointment = appointment_service.create_appointment(db, user, payload)
    return success_response("Appointment created successfully", {"appointment": appointment.to_dict()},
                            status_code=201)


@router.get("")
def list_appointments(
    status: Optional[str] = None,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    appointments = appointment_service.list_appointments(db, user, status, start_date, end_date)
    return success_response("Appointments retrieved successfully", {
        "appointments": [a.to_dict() for a in appointments],
        "count": len(appointments),
    })


# Registered before /{appointment_id} so "upcoming" isn't parsed as an id
@router.get("/upcoming")
def list_upcoming(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    appointments = appointment_service.list_upcoming(db, user)
    return success_response("Upcoming appointments retrieved successfully", {
        "appointments": [a.to_dict() for a in appointments],
        "count": len(appointments),
    })


@router.get("/{appointment_id}")
def get_appointment(appointment_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    appointment = appointment_service.get_owned_appointment(db, user, appointment_id)
    return success_response("Appointment retrieved successfully", {"appointment": appointment.to_dict()})


@router.put("/{appointment_id}")
def update_appointment(appointment_id: int, payload: AppointmentUpdateRequest,
                       user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    appointment = appointment_service.update_appointment(db, user, appointment_id, payload)
    return success_response("Appointment updated successfully", {"appointment": appointment.to_dict()})


@router.delete("/{appointment_id}")
def cancel_appointment(appointment_id: int, payload: Optional[AppointmentCancelRequest] = None,
                       user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    reason = payload.reason if payload else None
    appointment = appointment_service.cancel_appointment(db, user, appointment_id, reason)
    return success_response("Appointment cancelled successfully", {"appointment": appointment.to_dict()})
