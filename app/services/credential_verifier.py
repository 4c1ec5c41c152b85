import enum
import logging
from functools import lru_cache

from app.repositories.user_store import UserStore
from app.security import hash_password, verify_password

logger = logging.getLogger(__name__)


class VerificationOutcome(enum.Enum):
    SUCCESS = "Login successful"
    FAILURE = "Invalid credentials"

    @property
    def message(self) -> str:
        return self.value


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("dummy-password-for-unknown-users")


class CredentialVerifier:
    """Decides whether a submitted username/password pair is valid.

    Knows nothing about HTTP: the caller turns the outcome into a response.
    An unknown username is a normal FAILURE, not an error. Errors raised by
    the store are propagated unchanged.
    """

    def __init__(self, store: UserStore):
        self._store = store

    async def verify(self, username: str, password: str) -> VerificationOutcome:
        user = await self._store.find_by_username(username)

        if user is None:
            # Keep the timing of unknown users close to that of a wrong password.
            verify_password(password, _dummy_hash())
            logger.debug("Login failed for unknown user %r", username)
            return VerificationOutcome.FAILURE

        if not verify_password(password, user.password_hash):
            logger.debug("Login failed for user %r: password mismatch", username)
            return VerificationOutcome.FAILURE

        return VerificationOutcome.SUCCESS
