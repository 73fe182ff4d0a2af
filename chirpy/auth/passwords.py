"""Password hashing with bcrypt."""

import bcrypt as _bcrypt

# bcrypt only reads the first 72 bytes; 4.x truncates silently, 5.x raises
MAX_PASSWORD_BYTES = 72


class PasswordHashError(Exception):
    """bcrypt rejected the password or the stored digest."""


class PasswordMismatchError(Exception):
    """The password does not match the stored digest."""


def hash_password(password: str) -> str:
    encoded = password.encode()
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise PasswordHashError(f"password is longer than {MAX_PASSWORD_BYTES} bytes")
    try:
        hashed = _bcrypt.hashpw(encoded, _bcrypt.gensalt())
    except ValueError as exc:
        raise PasswordHashError(str(exc)) from exc
    return hashed.decode()


def check_password_hash(hashed_password: str, password: str) -> None:
    """Raise PasswordMismatchError unless ``password`` matches ``hashed_password``.

    A malformed digest raises PasswordHashError instead, so callers can tell a
    wrong password apart from a corrupt row.
    """
    try:
        ok = _bcrypt.checkpw(password.encode(), hashed_password.encode())
    except ValueError as exc:
        raise PasswordHashError(str(exc)) from exc
    if not ok:
        raise PasswordMismatchError("password does not match")
