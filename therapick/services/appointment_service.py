# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from therapick.models.appointment import Appointment, AppointmentStatus
from therapick.models.user import User
from therapick.schemas.appointment_schemas import AppointmentCreateRequest, AppointmentUpdateRequest
from therapick.utils.errors import AuthorizationError, NotFoundError, PolicyViolationError, ValidationError
from therapick.utils.time_utils import parse_datetime, utcnow

logger = logging.getLogger(__name__)


def _parse_date(value, field: str = "date") -> Optional[datetime]:
    try:
        return parse_datetime(value)
    except ValueError:
        raise ValidationError(f"Invalid {field}. Use an ISO date such as 2025-01-31")


def _ensure_future(date: datetime, now: datetime) -> None:
    if date <= now:
        raise ValidationError("Appointment date must be in the future")


def create_appointment(db: Session, user: User, payload: AppointmentCreateRequest, now: datetime = None) -> Appointment:
    now = now or utcnow()

    if not (payload.therapist_id and payload.therapist_name and payload.therapist_specialty
            and payload.date and payload.time):
        raise ValidationError("Please provide all required fields")

    date = _parse_date(payload.date)
    _ensure_future(date, now)

    appointment = Appointment(
        user_id=user.id,
        therapist_id=str(payload.therapist_id),
        therapist_name=payload.therapist_name,
        therapist_specialty=payload.therapist_specialty,
        date=date,
        time=payload.time,
        notes=payload.notes,
    )
    db.add(appointment)
    db.commit()
    db.refresh(appointment)

    logger.info("📅 User %s booked appointment %s with therapist %s", user.id, appointment.id, appointment.therapist_id)
    return appointment


def list_appointments(db: Session, user: User, status: Optional[str] = None,
                      start_date: Optional[str] = None, end_date: Optional[str] = None) -> List[Appointment]:
    query = db.query(Appointment).filter(Appointment.user_id == user.id)

    if status:
        try:
            query = query.filter(Appointment.status == AppointmentStatus(status))
        except ValueError:
            raise ValidationError(f"Invalid status '{status}'")

    start = _parse_date(start_date, "startDate")
    end = _parse_date(end_date, "endDate")
    if start:
        query = query.filter(Appointment.date >= start)
    if end:
        query = query.filter(Appointment.date <= end)

    return query.order_by(Appointment.date.asc(), Appointment.id.asc()).all()


def list_upcoming(db: Session, user: User, now: datetime = None) -> List[Appointment]:
    now = now or utcnow()
    return (
        db.query(Appointment)
        .filter(
            Appointment.user_id == user.id,
            Appointment.status == AppointmentStatus.upcoming,
            Appointment.date >= now,
        )
        .order_by(Appointment.date.asc(), Appointment.id.asc())
        .all()
    )


def get_owned_appointment(db: Session, user: User, appointment_id: int, action: str = "access") -> Appointment:
    appointment = db.query(Appointment).filter(Appointment.id == appointment_id).first()
    if not appointment:
        raise NotFoundError("Appointment not found")
    if appointment.user_id != user.id:
        raise AuthorizationError(f"Not authorized to {action} this appointment")
    return appointment


def update_appointment(db: Session, user: User, appointment_id: int, payload: AppointmentUpdateRequest,
                       now: datetime = None) -> Appointment:
    now = now or utcnow()
    appointment = get_owned_appointment(db, user, appointment_id, "update")

    if not appointment.is_active:
        raise PolicyViolationError(f"Cannot update a {appointment.status.value} appointment")

    if payload.date:
        new_date = _parse_date(payload.date)
        _ensure_future(new_date, now)
        appointment.date = new_date
        appointment.status = AppointmentStatus.rescheduled
    if payload.time:
        appointment.time = payload.time
    if "notes" in payload.model_fields_set:
        appointment.notes = payload.notes

    db.commit()
    db.refresh(appointment)
    return appointment


def cancel_appointment(db: Session, user: User, appointment_id: int, reason: Optional[str] = None,
                       now: datetime = None) -> Appointment:
    now = now or utcnow()
    appointment = get_owned_appointment(db, user, appointment_id, "cancel")

    if not appointment.is_active:
        raise PolicyViolationError(f"Cannot cancel a {appointment.status.value} appointment")

    if not appointment.can_be_cancelled(now):
        raise PolicyViolationError("Appointments must be cancelled at least 24 hours in advance")

    appointment.status = AppointmentStatus.cancelled
    appointment.cancellation_reason = reason
    appointment.cancelled_at = now
    db.commit()
    db.refresh(appointment)

    logger.info("🗑️ User %s cancelled appointment %s", user.id, appointment.id)
    return appointment
