"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: the presentation layer depends on abstractions only.
"""

from core.interfaces.add_account import AddAccount
from core.interfaces.email_validator import EmailValidator

__all__ = [
    "AddAccount",
    "EmailValidator",
]
