"""Account creation contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Account, AddAccountModel


@runtime_checkable
class AddAccount(Protocol):
    """Creates an account from validated sign-up data.

    Implementations may persist or call external services; the caller only
    relies on getting an `Account` back or an exception.
    """

    def add(self, account: AddAccountModel) -> Account:
        ...
