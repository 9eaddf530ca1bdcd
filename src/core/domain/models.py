"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  Core to any I/O library.
- Models compare by value, so collaborators and tests can reason about them
  without identity tricks.

Note:
- These models describe *what* an account is, not *how* it gets stored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class AddAccountModel(BaseModel):
    """Input for account creation.

    Why a separate model:
    - The sign-up payload carries `passwordConfirmation`; the account-creation
      capability never sees it.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Display name of the new account.",
    )
    email: str = Field(
        ...,
        min_length=1,
        description="Email address, already checked by the EmailValidator.",
    )
    password: str = Field(
        ...,
        min_length=1,
        description="Plain password as received; hashing belongs to the AddAccount implementation.",
    )


class Account(BaseModel):
    """An account as returned by the AddAccount capability.

    The presentation layer treats it as opaque and returns it verbatim.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Identifier assigned by the AddAccount implementation.",
    )
    name: str = Field(..., description="Display name.")
    email: str = Field(..., description="Email address.")
    password: str = Field(..., description="Password (or hash) as stored.")
