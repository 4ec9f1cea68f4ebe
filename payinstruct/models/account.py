"""Account data models for payinstruct."""

from pydantic import BaseModel, Field


class Account(BaseModel):
    """An account as supplied by the caller. Never mutated."""

    id: str = Field(..., description="Account identifier (matched case-sensitively)")
    balance: int = Field(..., description="Current balance in minor units")
    currency: str = Field(..., description="3-letter currency code, any case")


class AccountSnapshot(BaseModel):
    """Reported state of a referenced account in a result."""

    id: str
    balance: int = Field(..., description="Balance after the transfer (unchanged unless executed)")
    balance_before: int = Field(..., description="Balance as supplied in the request")
    currency: str = Field(..., description="Uppercased currency code")
