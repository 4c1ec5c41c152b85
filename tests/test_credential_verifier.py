import pytest

from app.models.user import User
from app.repositories.user_store import InMemoryUserStore
from app.security import hash_password
from app.services.credential_verifier import CredentialVerifier, VerificationOutcome


@pytest.fixture(scope="module")
def verifier():
    store = InMemoryUserStore([
        User(id="u-1", username="alice", password_hash=hash_password("secret")),
        User(id="u-2", username="carol", password_hash=hash_password("pässwörd")),
    ])
    return CredentialVerifier(store)


def test_outcome_messages():
    assert VerificationOutcome.SUCCESS.message == "Login successful"
    assert VerificationOutcome.FAILURE.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_verify_correct_password(verifier):
    assert await verifier.verify("alice", "secret") is VerificationOutcome.SUCCESS


@pytest.mark.asyncio
async def test_verify_non_ascii_password(verifier):
    assert await verifier.verify("carol", "pässwörd") is VerificationOutcome.SUCCESS
    assert await verifier.verify("carol", "passwort") is VerificationOutcome.FAILURE


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["wrong", "Secret", "SECRET", "secret ", " secret", "secre", ""])
async def test_verify_wrong_password(verifier, password):
    assert await verifier.verify("alice", password) is VerificationOutcome.FAILURE


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["secret", "", "anything"])
async def test_verify_unknown_user(verifier, password):
    assert await verifier.verify("bob", password) is VerificationOutcome.FAILURE


@pytest.mark.asyncio
async def test_verify_empty_username(verifier):
    assert await verifier.verify("", "secret") is VerificationOutcome.FAILURE


@pytest.mark.asyncio
async def test_verify_overlong_password(verifier):
    assert await verifier.verify("alice", "secret" + "x" * 100) is VerificationOutcome.FAILURE


@pytest.mark.asyncio
async def test_verify_is_idempotent(verifier):
    results = [await verifier.verify("alice", "secret") for _ in range(3)]
    assert results == [VerificationOutcome.SUCCESS] * 3

    results = [await verifier.verify("alice", "nope") for _ in range(3)]
    assert results == [VerificationOutcome.FAILURE] * 3


@pytest.mark.asyncio
async def test_verify_corrupt_stored_hash():
    store = InMemoryUserStore([User(id="u-1", username="alice", password_hash="not-a-bcrypt-hash")])

    assert await CredentialVerifier(store).verify("alice", "not-a-bcrypt-hash") is VerificationOutcome.FAILURE


@pytest.mark.asyncio
async def test_verify_propagates_store_errors():
    class FailingStore:
        async def find_by_username(self, username):
            raise ConnectionError("db down")

    with pytest.raises(ConnectionError):
        await CredentialVerifier(FailingStore()).verify("alice", "secret")


@pytest.mark.asyncio
async def test_verify_unencodable_password(verifier):
    assert await verifier.verify("alice", "\ud800") is VerificationOutcome.FAILURE
    assert await verifier.verify("alice", "secret\udfff") is VerificationOutcome.FAILURE


@pytest.mark.asyncio
async def test_verify_unencodable_username(verifier):
    assert await verifier.verify("\ud800", "secret") is VerificationOutcome.FAILURE
