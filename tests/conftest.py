from dataclasses import dataclass

import pytest

from core.domain.models import Account, AddAccountModel
from presentation.controllers.signup import SignUpController


class EmailValidatorStub:
    def is_valid(self, email: str) -> bool:
        return True


class AddAccountStub:
    def add(self, account: AddAccountModel) -> Account:
        return Account(
            id="valid_id",
            name="valid_name",
            email="valid_email",
            password="valid_password",
        )


@dataclass
class Sut:
    sut: SignUpController
    email_validator: EmailValidatorStub
    add_account: AddAccountStub


@pytest.fixture
def make_sut():
    def _make() -> Sut:
        email_validator = EmailValidatorStub()
        add_account = AddAccountStub()
        sut = SignUpController(email_validator, add_account)
        return Sut(sut=sut, email_validator=email_validator, add_account=add_account)

    return _make


@pytest.fixture
def valid_body():
    return {
        "name": "Jane Doe",
        "email": "jane.doe@gmail.com",
        "password": "secret_password",
        "passwordConfirmation": "secret_password",
    }
