# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, Boolean, Enum
from sqlalchemy.orm import relationship
from therapick.models.database import Base
from therapick.utils.time_utils import as_utc, utcnow
import enum


class UserRole(enum.Enum):
    user = "user"
    guest = "guest"
    admin = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, default="")
    email = Column(String, nullable=True, unique=True, index=True)  # NULL for guests
    password_hash = Column(String, nullable=True)
    role = Column(Enum(UserRole), default=UserRole.user, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    location = Column(String, nullable=True)
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow)

    # ✅ Guest session tracking
    device_id = Column(String, nullable=True, unique=True, index=True)

    # ✅ Relationships
    appointments = relationship("Appointment", back_populates="user", cascade="all, delete-orphan")
    mood_entries = relationship("MoodEntry", back_populates="user", cascade="all, delete-orphan")
    saved_therapists = relationship("SavedTherapist", back_populates="user", cascade="all, delete-orphan")

    def public_profile(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "location": self.location,
            "isActive": self.is_active,
            "lastLogin": as_utc(self.last_login),
            "createdAt": as_utc(self.created_at),
        }

    def __repr__(self):
        return f"<User id={self.id} role={self.role.value}>"
