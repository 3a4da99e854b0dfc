# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


import bcrypt
from typing import Optional
from fastapi import Header
from therapick.utils.errors import AuthenticationError
from therapick.utils.jwt_utils import verify_access_token


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    if not password_hash:
        return False
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def extract_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization[len("Bearer "):].strip() or None


# ✅ Dependency to extract token payload
def require_token(authorization: Optional[str] = Header(None)) -> dict:
    token = extract_token(authorization)
    if not token:
        raise AuthenticationError("Not authorized to access this route")
    return verify_access_token(token)
