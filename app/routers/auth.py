from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_credential_verifier
from app.schemas.auth import LoginRequest, LoginResponse
from app.services.credential_verifier import CredentialVerifier, VerificationOutcome

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": LoginResponse}, 400: {"model": LoginResponse}},
)
async def login(request: LoginRequest, verifier: CredentialVerifier = Depends(get_credential_verifier)):
    outcome = await verifier.verify(request.username, request.password)
    status_code = 200 if outcome is VerificationOutcome.SUCCESS else 401
    return JSONResponse(
        status_code=status_code,
        content=LoginResponse(message=outcome.message).model_dump(),
    )
