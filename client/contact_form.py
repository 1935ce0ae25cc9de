import logging
from typing import Optional

import httpx

from util.enum import FormField, FormStatus

logger = logging.getLogger(__name__)

FIELDS = ("firstName", "lastName", "email", "phone", "message")

REQUIRED_FIELDS = {
    FormField.first_name: "First name is required",
    FormField.last_name: "Last name is required",
    FormField.email: "Email is required",
    FormField.message: "Message cannot be empty",
}

CAPTCHA_REQUIRED = "Please verify you're not a robot"


class ContactForm:
    """State and submission logic behind the contact page form.

    `http` is any httpx.Client whose base URL points at the site,
    so the form can be driven against a live server or a TestClient.
    """

    def __init__(self, http: httpx.Client, endpoint: str = "/api/contact"):
        self.http = http
        self.endpoint = endpoint
        self.data: dict[str, str] = dict.fromkeys(FIELDS, "")
        self.captcha_token: Optional[str] = None
        self.errors: dict[FormField, str] = {}
        self.status = FormStatus.idle
        self.loading = False

    def update_field(self, name: str, value: str) -> None:
        self.data[name] = value

    def set_captcha(self, token: Optional[str]) -> None:
        """Store the widget token; None when the challenge expires"""
        self.captcha_token = token

    @property
    def submit_enabled(self) -> bool:
        return not self.loading

    def validate(self) -> dict[FormField, str]:
        errors = {}
        for field, msg in REQUIRED_FIELDS.items():
            if not self.data.get(field.value, "").strip():
                errors[field] = msg
        if not self.captcha_token:
            errors[FormField.captcha] = CAPTCHA_REQUIRED
        return errors

    def payload(self) -> dict[str, Optional[str]]:
        return {**self.data, "captcha": self.captcha_token}

    def reset(self) -> None:
        self.data = dict.fromkeys(FIELDS, "")
        self.captcha_token = None

    def submit(self) -> bool:
        """Validate and post the form once

        Returns True when the server accepted the message. While a
        submission is in flight the control is disabled and further
        calls do nothing.
        """
        if not self.submit_enabled:
            return False

        self.errors = self.validate()
        if self.errors:
            return False

        self.loading = True
        self.status = FormStatus.sending
        try:
            response = self.http.post(self.endpoint, json=self.payload())
        except httpx.HTTPError as e:
            logger.warning(f"Contact form submission failed: {e}")
            response = None
        finally:
            self.loading = False

        if response is not None and response.is_success:
            self.status = FormStatus.success
            self.reset()
            return True

        self.status = FormStatus.failure
        return False
