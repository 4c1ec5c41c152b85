import bcrypt

# bcrypt ignores (or, in recent releases, rejects) input past this length.
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8", "surrogatepass")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored bcrypt hash.

    Returns False instead of raising for passwords bcrypt cannot process
    (too long, or not encodable as UTF-8) and for hashes it cannot parse.
    """
    try:
        encoded = password.encode()
    except UnicodeEncodeError:
        return False
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode())
    except ValueError:
        return False
