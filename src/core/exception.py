from src.core.enums import VerificationFailureReason


class BaseAppError(Exception):
    def __init__(self, message: str = "An error occured"):
        self.message = message
        super().__init__(self.message)


class AppValueError(BaseAppError):
    pass


class BusinessRuleError(BaseAppError):
    pass


class InvalidVerificationCodeError(BusinessRuleError):
    def __init__(self, reason: VerificationFailureReason, message: str = "Invalid verification code."):
        self.reason = reason
        super().__init__(message)
