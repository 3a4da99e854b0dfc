# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
import logging
from typing import List

from cryptography.fernet import Fernet, InvalidToken, MultiFernet
from sqlalchemy.types import TypeDecorator, Text

logger = logging.getLogger(__name__)

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()


def load_keys(raw: str) -> List[Fernet]:
    """
    FERNET_SECRET holds one or more comma-separated keys, newest first.
    New notes are encrypted with the first key; older keys still decrypt.
    """
    secrets = [s.strip() for s in (raw or "").split(",") if s.strip()]
    if not secrets:
        raise EnvironmentError("FERNET_SECRET is missing. Please set it in your environment or .env file.")
    try:
        return [Fernet(s) for s in secrets]
    except (ValueError, TypeError) as e:
        raise ValueError("FERNET_SECRET is invalid. Each key must be a 32-byte url-safe base64 string.") from e


# 🔐 Primary key first, retired keys after it
cipher = MultiFernet(load_keys(os.getenv("FERNET_SECRET")))


def encrypt(text: str) -> str:
    return cipher.encrypt(text.encode("utf-8")).decode("utf-8")


def decrypt(token: str) -> str:
    try:
        return cipher.decrypt(token.encode("utf-8")).decode("utf-8")
    except InvalidToken:
        logger.error("❌ Stored notes could not be decrypted with any configured FERNET_SECRET key")
        raise


def rotate(token: str) -> str:
    """Re-encrypt a stored token under the primary key."""
    return cipher.rotate(token.encode("utf-8")).decode("utf-8")


class EncryptedText(TypeDecorator):
    """Free-text notes column, stored as a Fernet token."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return encrypt(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return decrypt(value)
