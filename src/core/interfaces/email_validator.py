"""Email validation contract.

Why Protocol:
- Structural contract (duck typing) with no rigid inheritance.
- Concrete checkers (regex, `email-validator`, a stub in tests) are
  interchangeable without coupling the controller to any of them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EmailValidator(Protocol):
    """Minimal contract for an email checker.

    Design rules:
    - `is_valid` is synchronous and free of side effects from the caller's view.
    - An invalid address is a `False` return, not an exception. Anything raised
      is treated by callers as an unexpected fault.
    """

    def is_valid(self, email: str) -> bool:
        """Return whether `email` is an acceptable address."""

        ...
