"""Result model returned for every processed instruction."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from payinstruct.models.account import AccountSnapshot
from payinstruct.models.instruction import InstructionType
from payinstruct.models.status import StatusCode


class PaymentStatus(str, Enum):
    """Outcome of an instruction."""
    SUCCESSFUL = "successful"
    PENDING = "pending"
    FAILED = "failed"


class PaymentResult(BaseModel):
    """Single result shape shared by successful, pending and failed outcomes."""

    type: Optional[InstructionType] = Field(None, description="DEBIT or CREDIT, null if unparseable")
    amount: Optional[int] = Field(None, description="Validated amount, null if invalid or unparsed")
    currency: Optional[str] = Field(None, description="Uppercased instruction currency")
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = Field(None, description="Execute-by date as written (YYYY-MM-DD)")
    status: PaymentStatus
    status_reason: str
    status_code: StatusCode
    accounts: List[AccountSnapshot] = Field(
        default_factory=list,
        description="Referenced accounts in input order",
    )

    @property
    def is_failed(self) -> bool:
        return self.status == PaymentStatus.FAILED

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
