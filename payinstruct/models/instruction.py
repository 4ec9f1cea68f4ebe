"""Parsed instruction model."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InstructionType(str, Enum):
    """Leading directive of an instruction."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


@dataclass(frozen=True)
class ParsedInstruction:
    """Raw tokens recognized by a grammar, not yet validated.

    Only ever constructed once every mandatory token was found, so a
    ParsedInstruction is never partial.
    """

    type: InstructionType
    amount: str
    currency: str
    debit_account_id: str
    credit_account_id: str
    execute_by: Optional[str] = None
