from fastapi import Depends, Request
from pydantic import ValidationError

from linkshort.core.config import Settings
from linkshort.core.errors import InvalidRequest
from linkshort.core.security import SecretVerifier

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_verifier(request: Request) -> SecretVerifier:
    return request.app.state.verifier


async def read_request_body(request: Request) -> dict:
    """Form or JSON body as a dict; anything unreadable becomes {}."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def authenticated_body(model):
    """
    Dependency returning the body parsed as `model`.
    The password is checked on the raw body first, so a wrong secret is
    answered with 401 whatever else the request contains.
    """
    async def dependency(
        body: dict = Depends(read_request_body),
        verifier: SecretVerifier = Depends(get_verifier),
    ):
        password = body.get("password")
        verifier.require(password if isinstance(password, str) else "")
        try:
            return model.model_validate(body)
        except ValidationError:
            raise InvalidRequest()

    return dependency
