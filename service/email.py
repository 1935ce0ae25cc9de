import asyncio
import logging
from pathlib import Path

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from jinja2 import Environment, FileSystemLoader

import error
from config.setting import Settings
from schema.contact import ContactFormIn

logger = logging.getLogger(__name__)

file_loader = FileSystemLoader(searchpath=str(Path(__file__).parent / "templates"))
env = Environment(loader=file_loader, autoescape=False)


class MailService:
    """Relays contact submissions to the site's inbox over SendGrid's SMTP relay"""

    def __init__(self, mail_config: ConnectionConfig, contact_email: str, timeout: float):
        self.mail_config = mail_config
        self.contact_email = contact_email
        self.timeout = timeout
        self.fast_mail = FastMail(mail_config)

    @classmethod
    def from_settings(cls, settings: Settings) -> "MailService":
        mail_config = ConnectionConfig(
            MAIL_USERNAME=settings.MAIL_USERNAME,
            MAIL_PASSWORD=str(settings.SENDGRID_API_KEY).strip(),
            MAIL_FROM=settings.CONTACT_EMAIL,
            MAIL_FROM_NAME=settings.MAIL_FROM_NAME or None,
            MAIL_PORT=settings.MAIL_PORT,
            MAIL_SERVER=settings.MAIL_SERVER,
            MAIL_SSL_TLS=settings.MAIL_SSL_TLS,
            MAIL_STARTTLS=settings.MAIL_STARTTLS,
            USE_CREDENTIALS=True,
            VALIDATE_CERTS=settings.VALIDATE_CERTS,
            MAIL_DEBUG=int(settings.MAIL_DEBUG),
            SUPPRESS_SEND=int(settings.SUPPRESS_SEND),
        )
        return cls(
            mail_config=mail_config,
            contact_email=settings.CONTACT_EMAIL,
            timeout=settings.MAIL_TIMEOUT_SECONDS,
        )

    def build_message(self, contact_data: ContactFormIn) -> MessageSchema:
        """Build the notification for one submission

        The message goes to the contact inbox (which is also the sender,
        see MAIL_FROM) and replies go back to the submitter.
        """
        body = env.get_template("contact_email.txt").render(
            full_name=contact_data.full_name,
            email=contact_data.email,
            phone=(contact_data.phone or "").strip(),
            message=contact_data.message,
        )
        return MessageSchema(
            subject=f"New Contact Form Submission from {contact_data.full_name}",
            recipients=[self.contact_email],
            reply_to=[contact_data.email],
            body=body,
            subtype=MessageType.plain,
        )

    async def send_contact_email(self, contact_data: ContactFormIn) -> None:
        message = self.build_message(contact_data)
        try:
            await asyncio.wait_for(
                self.fast_mail.send_message(message), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise error.EmailTimeoutError() from e
        logger.info(f"Contact email sent for {contact_data.email}")
