import json

import httpx
import pytest

from client.contact_form import ContactForm
from util.enum import FormField, FormStatus


class Recorder:
    """Mock transport handler that answers with a fixed status."""

    def __init__(self, status_code=200, exc=None):
        self.status_code = status_code
        self.exc = exc
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json={"message": "ok"})


def make_form(recorder):
    http = httpx.Client(
        base_url="http://site.test", transport=httpx.MockTransport(recorder)
    )
    return ContactForm(http)


def fill(form, captcha="tok"):
    form.update_field("firstName", "A")
    form.update_field("lastName", "B")
    form.update_field("email", "a@b.com")
    form.update_field("message", "hi")
    form.set_captcha(captcha)


def test_empty_form_reports_every_required_field():
    recorder = Recorder()
    form = make_form(recorder)

    assert form.validate() == {
        FormField.first_name: "First name is required",
        FormField.last_name: "Last name is required",
        FormField.email: "Email is required",
        FormField.message: "Message cannot be empty",
        FormField.captcha: "Please verify you're not a robot",
    }
    assert form.submit() is False
    assert set(form.errors) == set(FormField)
    assert recorder.requests == []
    assert form.status == FormStatus.idle


def test_whitespace_only_counts_as_empty():
    form = make_form(Recorder())
    fill(form)
    form.update_field("message", "   ")

    assert form.validate() == {FormField.message: "Message cannot be empty"}


def test_filled_form_is_valid_without_phone():
    form = make_form(Recorder())
    fill(form)

    assert form.validate() == {}


def test_expired_captcha_blocks_submit():
    recorder = Recorder()
    form = make_form(recorder)
    fill(form)
    form.set_captcha(None)

    assert form.submit() is False
    assert form.errors == {FormField.captcha: "Please verify you're not a robot"}
    assert recorder.requests == []


def test_validate_has_no_side_effects():
    form = make_form(Recorder())

    form.validate()

    assert form.errors == {}
    assert form.status == FormStatus.idle


def test_successful_submit_posts_once_and_resets():
    recorder = Recorder()
    form = make_form(recorder)
    fill(form)
    form.update_field("phone", "555")

    assert form.submit() is True

    assert len(recorder.requests) == 1
    request = recorder.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/api/contact"
    assert json.loads(request.content) == {
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "phone": "555",
        "message": "hi",
        "captcha": "tok",
    }
    assert form.status == "Message sent successfully!"
    assert form.data == {
        "firstName": "",
        "lastName": "",
        "email": "",
        "phone": "",
        "message": "",
    }
    assert form.captcha_token is None
    assert form.loading is False


@pytest.mark.parametrize("status_code", [400, 500, 504])
def test_rejected_submit_keeps_fields(status_code):
    recorder = Recorder(status_code=status_code)
    form = make_form(recorder)
    fill(form)

    assert form.submit() is False

    assert len(recorder.requests) == 1
    assert form.status == FormStatus.failure
    assert form.data["firstName"] == "A"
    assert form.captcha_token == "tok"
    assert form.submit_enabled is True


def test_transport_error_is_a_failure():
    recorder = Recorder(exc=httpx.ConnectError("refused"))
    form = make_form(recorder)
    fill(form)

    assert form.submit() is False

    assert form.status == "Failed to send message."
    assert form.loading is False
    assert form.data["message"] == "hi"


def test_submit_is_disabled_while_pending():
    recorder = Recorder()
    form = make_form(recorder)
    fill(form)
    form.loading = True

    assert form.submit_enabled is False
    assert form.submit() is False
    assert recorder.requests == []


def test_end_to_end_against_the_api(client, captcha, mailer):
    form = ContactForm(client)
    fill(form)

    assert form.submit() is True

    assert form.status == "Message sent successfully!"
    assert all(value == "" for value in form.data.values())
    assert captcha.calls == ["tok"]
    assert len(mailer.sent) == 1
    assert mailer.sent[0].email == "a@b.com"


def test_end_to_end_captcha_rejection(client, captcha, mailer):
    captcha.result = False
    form = ContactForm(client)
    fill(form)

    assert form.submit() is False

    assert form.status == FormStatus.failure
    assert form.data["email"] == "a@b.com"
    assert mailer.sent == []
