from src.modules.account.value_objects.verification_code import VerificationCode

__all__ = [
    "VerificationCode",
]
