import secrets
import string

VERIFICATION_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_verification_code(length: int = 6, alphabet: str = VERIFICATION_CODE_ALPHABET) -> str:
    """Generate a random verification code of given length using a CSPRNG."""
    if length <= 0:
        raise ValueError("Verification code length must be positive")
    if not alphabet:
        raise ValueError("Verification code alphabet must not be empty")
    return "".join(secrets.choice(alphabet) for _ in range(length))
