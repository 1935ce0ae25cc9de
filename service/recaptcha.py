import logging
from typing import Optional

import httpx
from pydantic import ValidationError

import error
from config.setting import Settings
from schema.contact import CaptchaVerifyOut

logger = logging.getLogger(__name__)


class RecaptchaService:
    """Verifies reCAPTCHA tokens against the siteverify endpoint"""

    def __init__(
        self,
        secret: str,
        verify_url: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.secret = secret
        self.verify_url = verify_url
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecaptchaService":
        return cls(
            secret=settings.RECAPTCHA_SECRET_KEY,
            verify_url=settings.RECAPTCHA_VERIFY_URL,
            timeout=settings.RECAPTCHA_TIMEOUT_SECONDS,
        )

    async def verify(self, token: str, remote_ip: Optional[str] = None) -> bool:
        """Verify a widget token

        Returns True only when the provider answers with success.
        Rejections, bad replies and transport errors all return False.

        Raises:
            error.CaptchaTimeoutError: the provider did not answer in time
        """
        data = {"secret": self.secret, "response": token}
        if remote_ip:
            data["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(self.verify_url, data=data)
                response.raise_for_status()
                result = CaptchaVerifyOut.model_validate(response.json())
        except httpx.TimeoutException as e:
            logger.warning(f"reCAPTCHA verification timed out: {e}")
            raise error.CaptchaTimeoutError() from e
        except httpx.HTTPError as e:
            logger.warning(f"reCAPTCHA verification request failed: {e}")
            return False
        except (ValueError, ValidationError) as e:
            logger.warning(f"Unreadable reCAPTCHA verification reply: {e}")
            return False

        if not result.success:
            logger.warning(
                f"reCAPTCHA rejected token: {', '.join(result.error_codes) or 'no error codes'}"
            )
        return result.success
