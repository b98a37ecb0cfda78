"""Single-use verification code for account confirmation.

A code is created against a ``DateTimeProvider``, lives for a fixed validity
window and can be verified exactly once. Every failed verification raises
``InvalidVerificationCodeError``; its ``reason`` tells expired, mismatched and
already-verified attempts apart.

USAGE:
    from src.core.utils.datetime_provider import datetime_provider
    from src.modules.account.value_objects import VerificationCode

    verification_code = VerificationCode.create(datetime_provider)
    # ... deliver verification_code.code to the user ...
    verification_code.verify(user_input)
"""

import secrets
from datetime import datetime, timedelta
from logging import Logger
from typing import Any, ClassVar, NoReturn, Self

from pydantic import Field, PrivateAttr, field_validator, model_validator

from src.core.config import settings
from src.core.enums import VerificationFailureReason
from src.core.exception import AppValueError, InvalidVerificationCodeError
from src.core.logging import get_logger
from src.core.schema import BaseSchema
from src.core.utils.datetime_provider import DateTimeProvider, datetime_provider, ensure_utc
from src.utils.helpers import generate_verification_code

logger: Logger = get_logger(name=__name__)


class VerificationCode(BaseSchema):
    """Verification code value object.

    Identity fields are frozen once created; only ``verified_at_utc`` changes,
    and only through ``verify``.
    """

    LENGTH: ClassVar[int] = 6

    code: str = Field(..., min_length=6, max_length=6, frozen=True)
    created_at_utc: datetime = Field(..., frozen=True)
    expires_at_utc: datetime = Field(..., frozen=True)
    verified_at_utc: datetime | None = None

    _datetime_provider: DateTimeProvider = PrivateAttr(default=datetime_provider)

    @field_validator("created_at_utc", "expires_at_utc", "verified_at_utc")
    @classmethod
    def normalize_utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v) if v is not None else None

    @model_validator(mode="after")
    def check_expiration_window(self) -> Self:
        if self.expires_at_utc <= self.created_at_utc:
            raise ValueError("Verification code must expire after it was created")
        if self.verified_at_utc is not None and not (
            self.created_at_utc <= self.verified_at_utc < self.expires_at_utc
        ):
            raise ValueError("Verification code must be verified between creation and expiration")
        return self

    @classmethod
    def create(cls, datetime_provider: DateTimeProvider, valid_for: timedelta | None = None) -> Self:
        """Generate a fresh, unverified code.

        Args:
            datetime_provider: Source of the current UTC instant
            valid_for: Validity window, defaults to
                ``settings.VERIFICATION_CODE_EXPIRE_MINUTES``

        Returns:
            New VerificationCode expiring ``valid_for`` after now

        Raises:
            AppValueError: If ``valid_for`` is not positive
        """
        if valid_for is None:
            valid_for = timedelta(minutes=settings.VERIFICATION_CODE_EXPIRE_MINUTES)
        if valid_for <= timedelta(0):
            raise AppValueError("Verification code validity window must be positive.")

        now = ensure_utc(datetime_provider.utc_now)
        instance = cls(
            code=generate_verification_code(cls.LENGTH),
            created_at_utc=now,
            expires_at_utc=now + valid_for,
        )
        instance._datetime_provider = datetime_provider

        logger.debug(f"Verification code created, expires at {instance.expires_at_utc.isoformat()}")
        return instance

    @classmethod
    def from_values(
        cls,
        datetime_provider: DateTimeProvider,
        code: str,
        created_at_utc: datetime,
        expires_at_utc: datetime,
        verified_at_utc: datetime | None = None,
    ) -> Self:
        """Rebuild a previously issued code from its stored values."""
        instance = cls(
            code=code,
            created_at_utc=created_at_utc,
            expires_at_utc=expires_at_utc,
            verified_at_utc=verified_at_utc,
        )
        instance._datetime_provider = datetime_provider
        return instance

    @property
    def is_active(self) -> bool:
        return self.verified_at_utc is not None

    @property
    def is_expired(self) -> bool:
        return self._now() >= self.expires_at_utc

    def verify(self, candidate: str | None) -> None:
        """Verify ``candidate`` against this code, once.

        Raises:
            InvalidVerificationCodeError: If the code was already verified, has
                expired, or does not match ``candidate``
        """
        if self.is_active:
            self._reject(VerificationFailureReason.ALREADY_VERIFIED)

        now = self._now()
        if now >= self.expires_at_utc:
            self._reject(VerificationFailureReason.EXPIRED)

        if not self._matches(candidate):
            self._reject(VerificationFailureReason.MISMATCH)

        self.verified_at_utc = now
        logger.info(f"Verification code verified at {now.isoformat()}")

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump()
        data["is_active"] = self.is_active
        return data

    def _now(self) -> datetime:
        return ensure_utc(self._datetime_provider.utc_now)

    def _matches(self, candidate: str | None) -> bool:
        if not candidate:
            return False
        return secrets.compare_digest(candidate.encode(), self.code.encode())

    def _reject(self, reason: VerificationFailureReason) -> NoReturn:
        logger.warning(f"Verification code rejected: {reason.value}")
        raise InvalidVerificationCodeError(reason=reason)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VerificationCode):
            return NotImplemented
        return dict(self) == dict(other)

    def __str__(self) -> str:
        return self.code
