from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional


class ContactFormIn(BaseModel):
    """Contact form payload as posted by the contact page.

    Fields are only checked client-side. Nulls become empty strings and
    other scalars are used as text, so a missing captcha token fails
    verification with the provider rather than here.
    """

    first_name: Optional[str] = Field("", alias="firstName")
    last_name: Optional[str] = Field("", alias="lastName")
    email: Optional[str] = ""
    phone: Optional[str] = None
    message: Optional[str] = ""
    captcha: Optional[str] = ""

    class Config:
        populate_by_name = True

    @field_validator("first_name", "last_name", "email", "message", "captcha", mode="before")
    @classmethod
    def as_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("phone", mode="before")
    @classmethod
    def phone_as_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class CaptchaConfigOut(BaseModel):
    site_key: str = Field(serialization_alias="siteKey")


class CaptchaVerifyOut(BaseModel):
    """Subset of the reCAPTCHA siteverify response"""

    success: bool = False
    hostname: Optional[str] = None
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")

    class Config:
        populate_by_name = True
