# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from therapick.models.database import Base
from therapick.utils.encryption import EncryptedText  # 🔐 Encryption utils
from therapick.utils.time_utils import as_utc, utcnow


class SavedTherapist(Base):
    __tablename__ = "saved_therapists"
    __table_args__ = (
        UniqueConstraint("user_id", "therapist_id", name="uq_saved_therapists_user_id_therapist_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    therapist_id = Column(String, nullable=False)

    # Snapshot of {name, specialty, rating, location} at save time
    therapist_data = Column(JSON, nullable=False, default=dict)
    moods = Column(JSON, default=list)
    notes = Column(EncryptedText, nullable=True)  # 🔐 Encrypted

    saved_at = Column(DateTime, default=utcnow, nullable=False)
    created_at = Column(DateTime, default=utcnow)

    user = relationship("User", back_populates="saved_therapists")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user": self.user_id,
            "therapistId": self.therapist_id,
            "therapistData": self.therapist_data or {},
            "moods": self.moods or [],
            "notes": self.notes,
            "savedAt": as_utc(self.saved_at),
            "createdAt": as_utc(self.created_at),
        }
