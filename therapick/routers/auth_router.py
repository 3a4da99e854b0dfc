# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
import uuid
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from therapick.auth import get_current_user
from therapick.models.database import get_db
from therapick.models.user import User, UserRole
from therapick.schemas.user_schemas import (
    RegisterRequest,
    LoginRequest,
    GuestLoginRequest,
    ProfileUpdateRequest,
    ChangePasswordRequest,
)
from therapick.utils.auth_utils import hash_password, verify_password
from therapick.utils.errors import AuthenticationError, AuthorizationError, ValidationError
from therapick.utils.jwt_utils import create_user_token
from therapick.utils.rate_limit_utils import AUTH_RATE_LIMIT, limiter
from therapick.utils.responses import success_response
from therapick.utils.time_utils import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _session_payload(user: User) -> dict:
    return {
        "token": create_user_token(user.id),
        "user": user.public_profile(),
    }


@router.post("/register")
@limiter.limit(AUTH_RATE_LIMIT)
def register(request: Request, payload: RegisterRequest, db: Session = Depends(get_db)):
    email = payload.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ValidationError("User already exists with this email")

    user = User(
        name=payload.name.strip(),
        email=email,
        password_hash=hash_password(payload.password),
        last_login=utcnow(),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("🆕 Registered user %s", user.id)
    return success_response("User registered successfully", _session_payload(user), status_code=201)


@router.post("/login")
@limiter.limit(AUTH_RATE_LIMIT)
def login(request: Request, payload: LoginRequest, db: Session = Depends(get_db)):
    if not payload.email or not payload.password:
        raise ValidationError("Please provide email and password")

    user = db.query(User).filter(User.email == payload.email.lower()).first()
    if not user:
        raise AuthenticationError("Invalid credentials")

    if not user.is_active:
        raise AuthorizationError("Your account has been deactivated")

    if not verify_password(payload.password, user.password_hash):
        raise AuthenticationError("Invalid credentials")

    user.last_login = utcnow()
    db.commit()
    db.refresh(user)

    logger.info("🔐 User %s logged in", user.id)

    return success_response("Login successful", _session_payload(user))


@router.post("/guest")
@limiter.limit(AUTH_RATE_LIMIT)
def guest_login(request: Request, payload: GuestLoginRequest = None, db: Session = Depends(get_db)):
    device_id = payload.device_id if payload else None

    if device_id:
        user = db.query(User).filter(User.device_id == device_id).first()
        if user:
            if not user.is_active:
                raise AuthorizationError("Your account has been deactivated")
            user.last_login = utcnow()
            db.commit()
            db.refresh(user)
            return success_response("🔁 Returning guest", _session_payload(user))

    new_user = User(
        name="Guest",
        role=UserRole.guest,
        device_id=device_id or uuid.uuid4().hex,
        last_login=utcnow(),
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    return success_response("🆕 Guest session created", _session_payload(new_user), status_code=201)


@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    return success_response("User retrieved successfully", {"user": user.public_profile()})


@router.put("/profile")
def update_profile(payload: ProfileUpdateRequest, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    if payload.name:
        user.name = payload.name.strip()
    if payload.location:
        user.location = payload.location
    db.commit()
    db.refresh(user)

    return success_response("Profile updated successfully", {"user": user.public_profile()})


@router.put("/change-password")
def change_password(payload: ChangePasswordRequest, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    if not payload.current_password or not payload.new_password:
        raise ValidationError("Please provide current and new password")

    if not verify_password(payload.current_password, user.password_hash):
        raise AuthenticationError("Current password is incorrect")

    user.password_hash = hash_password(payload.new_password)
    db.commit()

    return success_response("Password changed successfully")
