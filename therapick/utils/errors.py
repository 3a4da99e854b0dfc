# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


class AppError(Exception):
    """Operational error carrying the HTTP status it should be reported with."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class AuthorizationError(AppError):
    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class PolicyViolationError(AppError):
    # A rule rejected the operation (e.g. cancelling inside 24h)
    status_code = 400


class DirectoryUnavailableError(AppError):
    status_code = 503

    def __init__(self, message: str = "Therapist directory unavailable"):
        super().__init__(message)
