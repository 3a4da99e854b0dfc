# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

import os
from datetime import timedelta
from jose import JWTError, jwt
from therapick.utils.errors import AuthenticationError
from therapick.utils.time_utils import utcnow

if os.getenv("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()

# 🔐 Load secret key from environment
SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("JWT_SECRET_KEY environment variable is not set.")

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", str(60 * 24 * 7)))  # 7 days


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    claims = dict(data)
    claims["exp"] = utcnow() + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def create_user_token(user_id: int) -> str:
    # ✅ `sub` must be a string per RFC 7519
    return create_access_token({"sub": str(user_id)})


def verify_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise AuthenticationError("Invalid or expired token")


def user_id_from_claims(claims: dict) -> int:
    try:
        return int(claims.get("sub"))
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid or expired token")
