"""payinstruct: parse and validate payment instructions written in the DEBIT/CREDIT DSL."""

__version__ = "0.1.0"
