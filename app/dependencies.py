from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories.user_store import SqlUserStore, UserStore
from app.services.credential_verifier import CredentialVerifier


async def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    return SqlUserStore(db)


async def get_credential_verifier(store: UserStore = Depends(get_user_store)) -> CredentialVerifier:
    return CredentialVerifier(store)
