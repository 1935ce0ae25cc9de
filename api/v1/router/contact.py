from fastapi import APIRouter, Depends, Request

from config.setting import Settings, get_settings
from controller.contact import ContactOp
from schema import SuccessOut
from schema.contact import ContactFormIn, CaptchaConfigOut
from service.email import MailService
from service.recaptcha import RecaptchaService

contact_router = APIRouter(tags=["contact"])


def get_contact_op(settings: Settings = Depends(get_settings)) -> ContactOp:
    return ContactOp(
        captcha=RecaptchaService.from_settings(settings),
        mailer=MailService.from_settings(settings),
    )


@contact_router.post("/contact", response_model=SuccessOut)
async def submit_contact_form(
    contact_data: ContactFormIn,
    request: Request,
    contact_op: ContactOp = Depends(get_contact_op),
):
    """
    Submit the contact form
    - Verifies the reCAPTCHA token
    - Emails the submission to the contact inbox with reply-to set to the sender
    """
    remote_ip = request.client.host if request.client else None
    return await contact_op.submit_contact_form(contact_data, remote_ip=remote_ip)


@contact_router.get("/contact/captcha", response_model=CaptchaConfigOut)
def get_captcha_config(settings: Settings = Depends(get_settings)):
    """Public reCAPTCHA site key for rendering the widget"""
    return CaptchaConfigOut(site_key=settings.RECAPTCHA_SITE_KEY)
