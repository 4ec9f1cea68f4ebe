"""Data models for payinstruct."""

from payinstruct.models.account import Account, AccountSnapshot
from payinstruct.models.instruction import InstructionType, ParsedInstruction
from payinstruct.models.result import PaymentResult, PaymentStatus
from payinstruct.models.status import StatusCode

__all__ = [
    "Account",
    "AccountSnapshot",
    "InstructionType",
    "ParsedInstruction",
    "PaymentResult",
    "PaymentStatus",
    "StatusCode",
]
