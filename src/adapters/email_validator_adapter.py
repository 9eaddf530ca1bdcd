"""EmailValidator backed by the `email-validator` library.

Implementation:
- Syntax check always; DNS deliverability only when enabled in settings.
- `EmailNotValidError` means "invalid" (False). Anything else is a fault and
  propagates so the controller can turn it into a 500.
"""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

from core.config import AppSettings
from core.interfaces.email_validator import EmailValidator


class EmailValidatorAdapter(EmailValidator):
    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(
                email,
                check_deliverability=self._settings.email_check_deliverability,
                allow_smtputf8=self._settings.email_allow_smtputf8,
            )
        except EmailNotValidError:
            return False
        return True
