import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import create_tables, async_session, is_sqlite
from app.seed import seed_user
from app.routers.auth import router as auth_router
from app.utils.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if is_sqlite():
        os.makedirs(settings.data_dir, exist_ok=True)
    await create_tables()
    async with async_session() as session:
        await seed_user(session, settings.seed_username, settings.seed_password)
    yield


app = FastAPI(
    title="Login API",
    description="Verifies a username/password pair against the user store",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST"],
    allow_headers=["Content-Type"],
)

register_exception_handlers(app)

app.include_router(auth_router, prefix="/api")


@app.get("/health")
async def health_check():
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
