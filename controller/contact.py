import logging
from typing import Optional

import error
from schema import SuccessOut
from schema.contact import ContactFormIn
from service.email import MailService
from service.recaptcha import RecaptchaService

logger = logging.getLogger(__name__)


class ContactOp:
    """Gate and relay a single contact submission.

    Verification always happens before the email is sent, and a failed
    step ends the request. Nothing is retried or stored.
    """

    def __init__(self, captcha: RecaptchaService, mailer: MailService):
        self.captcha = captcha
        self.mailer = mailer

    async def submit_contact_form(
        self, contact_data: ContactFormIn, remote_ip: Optional[str] = None
    ) -> SuccessOut:
        if not await self.captcha.verify(contact_data.captcha, remote_ip=remote_ip):
            raise error.CaptchaVerificationError()

        try:
            await self.mailer.send_contact_email(contact_data)
        except error.EmailTimeoutError:
            logger.error(f"Email provider timed out for {contact_data.email}")
            raise
        except Exception as e:
            logger.exception(f"Failed to send contact email: {e}")
            raise error.EmailDeliveryError() from e

        return SuccessOut(message="Email sent successfully")
