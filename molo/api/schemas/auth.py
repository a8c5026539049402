from pydantic import AliasChoices, BaseModel, Field


class PinRequest(BaseModel):
    """Body of /initialize and /login"""
    pin: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("pin", "password"),
        description="Access PIN; 'password' is accepted as an alternate key"
    )

    class Config:
        json_schema_extra = {
            "example": {"pin": "1234"}
        }


class InitStatusResponse(BaseModel):
    initialized: bool


class LoginResponse(BaseModel):
    token: str
    expiresIn: int = Field(..., description="Token lifetime in seconds")
