"""AddAccount without storage.

Used by the CLI wiring, which handles one request per process. Assigns a UUID4
id and returns the account; nothing is kept between calls.
"""

from __future__ import annotations

import uuid

from core.domain.models import Account, AddAccountModel
from core.interfaces.add_account import AddAccount


class InMemoryAddAccount(AddAccount):
    def add(self, account: AddAccountModel) -> Account:
        return Account(id=str(uuid.uuid4()), **account.model_dump())
