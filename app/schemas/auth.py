from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    username: str
    password: str


class LoginResponse(BaseModel):
    message: str
