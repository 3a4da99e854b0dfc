# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.

from fastapi import Depends
from sqlalchemy.orm import Session
from therapick.models.database import get_db
from therapick.models.user import User
from therapick.utils.auth_utils import require_token
from therapick.utils.errors import AuthorizationError, NotFoundError
from therapick.utils.jwt_utils import user_id_from_claims


# ✅ Resolves the bearer token to an active user
def get_current_user(claims: dict = Depends(require_token), db: Session = Depends(get_db)) -> User:
    user = db.query(User).filter(User.id == user_id_from_claims(claims)).first()
    if not user:
        raise NotFoundError("User not found")

    if not user.is_active:
        raise AuthorizationError("User account is inactive")

    return user
