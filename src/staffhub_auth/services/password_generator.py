import secrets
import string

ALPHABET = string.ascii_letters + string.digits
DEFAULT_LENGTH = 16


def generate_temporary_password(length: int = DEFAULT_LENGTH) -> str:
    """Return a random password drawn from letters and digits."""
    if length <= 0:
        msg = "Password length must be positive"
        raise ValueError(msg)
    return "".join(secrets.choice(ALPHABET) for _ in range(length))
