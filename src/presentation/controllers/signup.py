"""Sign-up controller.

Flow (short-circuits at the first failure):
1. required fields present, in a fixed order, and all strings
2. password matches its confirmation
3. email accepted by the injected `EmailValidator`
4. account created by the injected `AddAccount`

Collaborator faults never leave `handle`: they become a 500 with a generic body.
"""

from __future__ import annotations

import logging

from core.domain.models import AddAccountModel
from core.interfaces import AddAccount, EmailValidator
from presentation.errors import InvalidParamError, MissingParamError
from presentation.helpers.http import bad_request, ok, server_error
from presentation.protocols import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "password", "passwordConfirmation")


class SignUpController:
    def __init__(self, email_validator: EmailValidator, add_account: AddAccount) -> None:
        self._email_validator = email_validator
        self._add_account = add_account

    def handle(self, request: HttpRequest) -> HttpResponse:
        response = self._handle(request)
        logger.debug("signup handled with status %s", response.status_code)
        return response

    def _handle(self, request: HttpRequest) -> HttpResponse:
        body = request.body or {}

        for field in REQUIRED_FIELDS:
            if not body.get(field):
                return bad_request(MissingParamError(field))

        for field in REQUIRED_FIELDS:
            if not isinstance(body[field], str):
                return bad_request(InvalidParamError(field))

        name = body["name"]
        email = body["email"]
        password = body["password"]

        if password != body["passwordConfirmation"]:
            return bad_request(InvalidParamError("passwordConfirmation"))

        new_account = AddAccountModel(name=name, email=email, password=password)

        try:
            if not self._email_validator.is_valid(email):
                return bad_request(InvalidParamError("email"))

            account = self._add_account.add(new_account)
        except Exception:
            logger.exception("signup failed in a collaborator")
            return server_error()

        return ok(account)
