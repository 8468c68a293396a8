"""Tier calculator error hierarchy.

All errors raised by the core inherit from TierCalcError. The HTTP shell's
exception handler in main.py converts them to structured JSON responses with
the class status code; the CLI prints the message and exits non-zero.

Not-found results and soft validity warnings are values, not errors.
"""


class TierCalcError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ParseError(TierCalcError):
    status_code = 422
    code = "PARSE_ERROR"


class TierFormatError(ParseError):
    code = "INVALID_TIER"


class MemoryFormatError(ParseError):
    code = "INVALID_MEMORY"


class ValidationError(TierCalcError):
    status_code = 422
    code = "VALIDATION_ERROR"
