class ServerError(Exception):
    """Base class for server-related errors"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class ServerTimeoutError(ServerError):
    """Raised when an upstream request times out"""

    def __init__(self, msg="Server request timed out", status_code=504):
        super().__init__(msg=msg, status_code=status_code)


class InvalidRequestError(ServerError):
    """Raised when request is invalid"""

    def __init__(self, msg="Invalid request", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class InternalServerError(ServerError):
    """Raised when an internal server error occurs"""

    def __init__(self, msg="Internal server error", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class CaptchaVerificationError(InvalidRequestError):
    """Raised when the reCAPTCHA provider rejects a token"""

    def __init__(self, msg="Failed reCAPTCHA verification", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class CaptchaTimeoutError(ServerTimeoutError):
    """Raised when the reCAPTCHA provider does not answer in time"""

    def __init__(self, msg="reCAPTCHA verification timed out", status_code=504):
        super().__init__(msg=msg, status_code=status_code)


class EmailDeliveryError(InternalServerError):
    """Raised when the email provider fails to accept a message"""

    def __init__(self, msg="Error sending email", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class EmailTimeoutError(ServerTimeoutError):
    """Raised when the email provider does not answer in time"""

    def __init__(self, msg="Email delivery timed out", status_code=504):
        super().__init__(msg=msg, status_code=status_code)
