"""Parsing and validation engine for payinstruct."""

from payinstruct.engine.text import normalize_whitespace, find_keyword_position, extract_next_word
from payinstruct.engine.grammar import parse_instruction, parse_with_grammar, DEBIT_GRAMMAR, CREDIT_GRAMMAR
from payinstruct.engine.validators import (
    validate_amount,
    is_valid_account_id,
    is_valid_date_format,
    is_future_date,
    is_supported_currency,
)
from payinstruct.engine.accounts import find_account_by_id, build_account_snapshots
from payinstruct.engine.processor import process_payment_instruction, PaymentInstructionError

__all__ = [
    "normalize_whitespace",
    "find_keyword_position",
    "extract_next_word",
    "parse_instruction",
    "parse_with_grammar",
    "DEBIT_GRAMMAR",
    "CREDIT_GRAMMAR",
    "validate_amount",
    "is_valid_account_id",
    "is_valid_date_format",
    "is_future_date",
    "is_supported_currency",
    "find_account_by_id",
    "build_account_snapshots",
    "process_payment_instruction",
    "PaymentInstructionError",
]
