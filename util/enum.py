import enum


class FormField(str, enum.Enum):
    """Contact form fields that carry a validation error."""

    first_name = "firstName"
    last_name = "lastName"
    email = "email"
    message = "message"
    captcha = "captcha"


class FormStatus(str, enum.Enum):
    """Status line shown under the contact form."""

    idle = ""
    sending = "Sending..."
    success = "Message sent successfully!"
    failure = "Failed to send message."
