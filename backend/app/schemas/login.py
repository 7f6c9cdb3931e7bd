"""Login request and token response schemas."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Payload for login attempts."""

    username: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
