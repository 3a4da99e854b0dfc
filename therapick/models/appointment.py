# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from datetime import timedelta
from sqlalchemy import Column, Integer, String, DateTime, Boolean, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
from therapick.models.database import Base
from therapick.utils.encryption import EncryptedText  # 🔐 Encryption utils
from therapick.utils.time_utils import as_utc, utcnow
import enum

CANCELLATION_WINDOW = timedelta(hours=24)


class AppointmentStatus(enum.Enum):
    upcoming = "upcoming"
    completed = "completed"
    cancelled = "cancelled"
    rescheduled = "rescheduled"


ACTIVE_STATUSES = (AppointmentStatus.upcoming, AppointmentStatus.rescheduled)


class Appointment(Base):
    __tablename__ = "appointments"
    __table_args__ = (
        Index("ix_appointments_user_id_date", "user_id", "date"),
        Index("ix_appointments_status_date", "status", "date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    therapist_id = Column(String, nullable=False)
    therapist_name = Column(String, nullable=False)
    therapist_specialty = Column(String, nullable=False)

    date = Column(DateTime, nullable=False)
    time = Column(String, nullable=False)  # slot label, e.g. "9:00 AM"
    status = Column(Enum(AppointmentStatus), default=AppointmentStatus.upcoming, nullable=False)

    notes = Column(EncryptedText, nullable=True)  # 🔐 Encrypted
    reminder_sent = Column(Boolean, default=False)
    cancellation_reason = Column(String(200), nullable=True)
    cancelled_at = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="appointments")

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    def can_be_cancelled(self, now=None) -> bool:
        now = now or utcnow()
        return self.date - now > CANCELLATION_WINDOW

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user": self.user_id,
            "therapistId": self.therapist_id,
            "therapistName": self.therapist_name,
            "therapistSpecialty": self.therapist_specialty,
            "date": as_utc(self.date),
            "time": self.time,
            "status": self.status.value,
            "notes": self.notes,
            "reminderSent": self.reminder_sent,
            "cancellationReason": self.cancellation_reason,
            "cancelledAt": as_utc(self.cancelled_at),
            "createdAt": as_utc(self.created_at),
            "updatedAt": as_utc(self.updated_at),
        }

    def __repr__(self):
        return f"<Appointment id={self.id} status={self.status.value}>"
