import pytest
from fastapi.testclient import TestClient

from api.v1.router.contact import get_contact_op
from config.setting import Settings, get_settings
from controller.contact import ContactOp
from main import app


class FakeCaptcha:
    def __init__(self, result=True, exc=None):
        self.result = result
        self.exc = exc
        self.calls = []

    async def verify(self, token, remote_ip=None):
        self.calls.append(token)
        if self.exc is not None:
            raise self.exc
        return self.result


class FakeMailer:
    def __init__(self, exc=None):
        self.exc = exc
        self.sent = []

    async def send_contact_email(self, contact_data):
        if self.exc is not None:
            raise self.exc
        self.sent.append(contact_data)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        RECAPTCHA_SECRET_KEY="test-secret",
        RECAPTCHA_SITE_KEY="test-site-key",
        RECAPTCHA_VERIFY_URL="https://captcha.test/siteverify",
        SENDGRID_API_KEY="SG.test-key",
        CONTACT_EMAIL="contact@example.com",
        SUPPRESS_SEND=True,
    )


@pytest.fixture
def captcha():
    return FakeCaptcha()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def client(settings, captcha, mailer):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_contact_op] = lambda: ContactOp(captcha=captcha, mailer=mailer)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def submission():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "",
        "message": "Hello there",
        "captcha": "tok",
    }
