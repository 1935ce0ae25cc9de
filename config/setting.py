import logging
from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import EmailStr, ValidationError

import error

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


class Settings(BaseSettings):
    RECAPTCHA_SECRET_KEY: str
    RECAPTCHA_SITE_KEY: str = ""
    RECAPTCHA_VERIFY_URL: str = "https://www.google.com/recaptcha/api/siteverify"
    RECAPTCHA_TIMEOUT_SECONDS: float = 10.0
    SENDGRID_API_KEY: str
    CONTACT_EMAIL: EmailStr
    MAIL_SERVER: str = "smtp.sendgrid.net"
    MAIL_PORT: int = 587
    MAIL_USERNAME: str = "apikey"
    MAIL_FROM_NAME: str = ""
    MAIL_STARTTLS: bool = True
    MAIL_SSL_TLS: bool = False
    VALIDATE_CERTS: bool = True
    MAIL_DEBUG: bool = False
    SUPPRESS_SEND: bool = False
    MAIL_TIMEOUT_SECONDS: float = 30.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Load settings once; a broken environment is a server fault, not a bad request"""
    try:
        return Settings()
    except ValidationError as e:
        logger.error(f"Invalid server configuration: {e}")
        raise error.InternalServerError() from e
