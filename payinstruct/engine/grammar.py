"""Grammar recognition for payment instructions.

Two fixed instruction shapes are supported:

    DEBIT <amount> <currency> FROM ACCOUNT <id> FOR CREDIT TO ACCOUNT <id> [ON <date>]
    CREDIT <amount> <currency> TO ACCOUNT <id> FOR DEBIT FROM ACCOUNT <id> [ON <date>]

The grammar is relaxed rather than strict: after a field is consumed, the
parser scans forward for the next required keyword and discards whatever text
sits in between. That skipped text is never validated. Any missing keyword or
empty field rejects the whole grammar; no partial instruction is produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from payinstruct.engine.text import extract_next_word, find_keyword_position, normalize_whitespace
from payinstruct.models.constants import EXECUTE_BY_KEYWORD
from payinstruct.models.instruction import InstructionType, ParsedInstruction

logger = logging.getLogger(__name__)


class StepKind(str, Enum):
    KEYWORD = "keyword"  # scan forward for a whole-word keyword, discard skipped text
    FIELD = "field"  # consume the next word into a named field


@dataclass(frozen=True)
class GrammarStep:
    kind: StepKind
    value: str  # keyword text for KEYWORD steps, ParsedInstruction field name for FIELD steps


@dataclass(frozen=True)
class InstructionGrammar:
    """A leading directive followed by a fixed sequence of steps."""

    instruction_type: InstructionType
    steps: Tuple[GrammarStep, ...]

    @property
    def leading_keyword(self) -> str:
        return self.instruction_type.value


def _keyword(word: str) -> GrammarStep:
    return GrammarStep(StepKind.KEYWORD, word)


def _field(name: str) -> GrammarStep:
    return GrammarStep(StepKind.FIELD, name)


DEBIT_GRAMMAR = InstructionGrammar(
    instruction_type=InstructionType.DEBIT,
    steps=(
        _field("amount"),
        _field("currency"),
        _keyword("FROM"),
        _keyword("ACCOUNT"),
        _field("debit_account_id"),
        _keyword("FOR"),
        _keyword("CREDIT"),
        _keyword("TO"),
        _keyword("ACCOUNT"),
        _field("credit_account_id"),
    ),
)

CREDIT_GRAMMAR = InstructionGrammar(
    instruction_type=InstructionType.CREDIT,
    steps=(
        _field("amount"),
        _field("currency"),
        _keyword("TO"),
        _keyword("ACCOUNT"),
        _field("credit_account_id"),
        _keyword("FOR"),
        _keyword("DEBIT"),
        _keyword("FROM"),
        _keyword("ACCOUNT"),
        _field("debit_account_id"),
    ),
)

# Attempted in order; first match wins
GRAMMARS: Tuple[InstructionGrammar, ...] = (DEBIT_GRAMMAR, CREDIT_GRAMMAR)


def parse_with_grammar(text: str, grammar: InstructionGrammar) -> Optional[ParsedInstruction]:
    """Run one grammar over normalized text.

    Args:
        text: Whitespace-normalized instruction
        grammar: Grammar to apply

    Returns:
        ParsedInstruction, or None if the text does not fit this grammar
    """
    leading = grammar.leading_keyword
    if find_keyword_position(text, leading, 0) != 0:
        return None

    remaining = text[len(leading):].strip()
    if not remaining:
        return None

    fields: Dict[str, str] = {}
    for step in grammar.steps:
        if step.kind == StepKind.FIELD:
            word = extract_next_word(remaining, 0)
            if not word:
                return None
            fields[step.value] = word
            remaining = remaining[len(word):].strip()
        else:
            pos = find_keyword_position(remaining, step.value, 0)
            if pos == -1:
                return None
            remaining = remaining[pos + len(step.value):].strip()

    # Optional "ON <date>". A dangling ON with nothing after it leaves the date unset.
    execute_by = None
    if remaining:
        pos = find_keyword_position(remaining, EXECUTE_BY_KEYWORD, 0)
        if pos != -1:
            remaining = remaining[pos + len(EXECUTE_BY_KEYWORD):].strip()
            execute_by = extract_next_word(remaining, 0) or None

    return ParsedInstruction(type=grammar.instruction_type, execute_by=execute_by, **fields)


def parse_instruction(instruction) -> Optional[ParsedInstruction]:
    """Normalize an instruction and recognize it as DEBIT or CREDIT form.

    Returns None when neither grammar matches (a malformed instruction).
    """
    text = normalize_whitespace(instruction)
    for grammar in GRAMMARS:
        parsed = parse_with_grammar(text, grammar)
        if parsed is not None:
            logger.debug(f"Instruction matched {grammar.leading_keyword} grammar")
            return parsed
    return None
