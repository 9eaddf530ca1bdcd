"""Composition root for the CLI.

Why here:
- The presentation layer only knows interfaces; this is the one place that
  picks concrete adapters.
"""

from __future__ import annotations

from adapters.email_validator_adapter import EmailValidatorAdapter
from adapters.memory_add_account import InMemoryAddAccount
from core.config import AppSettings
from presentation.controllers.signup import SignUpController


def make_signup_controller(settings: AppSettings | None = None) -> SignUpController:
    settings = settings or AppSettings()
    return SignUpController(
        email_validator=EmailValidatorAdapter(settings),
        add_account=InMemoryAddAccount(),
    )
