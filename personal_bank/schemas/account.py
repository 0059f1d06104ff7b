"""
Pydantic schemas for account operations.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from personal_bank.security import check_credential


class AccountCreate(BaseModel):
    """Request to open a new account."""
    holder_name: str = Field(min_length=1, max_length=100)
    account_number: str = Field(min_length=1, max_length=34)
    credential: str = Field(min_length=1)

    @field_validator("holder_name", "account_number")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("credential")
    @classmethod
    def credential_must_fit_hash(cls, v: str) -> str:
        # The limit is in UTF-8 bytes, not characters
        return check_credential(v)


class AccountSummary(BaseModel):
    """One row of the admin account listing."""
    holder_name: str
    account_number: str
    balance: Decimal

    model_config = {"frozen": True}

    @property
    def formatted_balance(self) -> str:
        return f"{self.balance:.2f}"
