"""Constants for payinstruct.

Fixed lookup tables shared by the parser and validators. None of these are
configurable at runtime.
"""

# Instruction currencies accepted (compared case-insensitively)
SUPPORTED_CURRENCIES = frozenset({"NGN", "USD", "GBP", "GHS"})

# Characters allowed in an account id besides ASCII letters and digits
ACCOUNT_ID_SPECIAL_CHARS = frozenset("-.@")

# Execute-by date (YYYY-MM-DD) bounds; no days-in-month check
DATE_FORMAT_LENGTH = 10
DATE_SEPARATOR_POSITIONS = (4, 7)
MIN_YEAR = 1900
MAX_YEAR = 9999
MIN_MONTH = 1
MAX_MONTH = 12
MIN_DAY = 1
MAX_DAY = 31

# Optional trailing clause keyword
EXECUTE_BY_KEYWORD = "ON"
