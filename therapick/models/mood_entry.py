# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from therapick.models.database import Base
from therapick.utils.encryption import EncryptedText  # 🔐 Encryption utils
from therapick.utils.time_utils import as_utc, utcnow


class MoodEntry(Base):
    __tablename__ = "mood_entries"
    # One entry per user per calendar day
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_mood_entries_user_id_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    date = Column(DateTime, nullable=False)  # always midnight
    mood = Column(String, nullable=False)
    notes = Column(EncryptedText, nullable=True)  # 🔐 Encrypted
    triggers = Column(JSON, default=list)
    activities = Column(JSON, default=list)

    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="mood_entries")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user": self.user_id,
            "date": as_utc(self.date),
            "mood": self.mood,
            "notes": self.notes,
            "triggers": self.triggers or [],
            "activities": self.activities or [],
            "createdAt": as_utc(self.created_at),
            "updatedAt": as_utc(self.updated_at),
        }
