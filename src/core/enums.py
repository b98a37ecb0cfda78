"""Core enums used across the application."""

from enum import Enum as PyEnum


class VerificationFailureReason(str, PyEnum):
    """Why a verification code was rejected."""

    EXPIRED = "expired"
    MISMATCH = "mismatch"
    ALREADY_VERIFIED = "already_verified"
