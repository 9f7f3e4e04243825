from pydantic import BaseModel

class SignupIn(BaseModel):
    email: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
