from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AmountErrorCode(str, Enum):
    """Stable codes for amount codec failures."""

    EMPTY_STRING = "EMPTY_STRING"
    INVALID_FORMAT = "INVALID_FORMAT"
    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    EXCESSIVE_PRECISION = "EXCESSIVE_PRECISION"
    INVALID_DECIMALS = "INVALID_DECIMALS"
    SCIENTIFIC_NOTATION_PRECISION = "SCIENTIFIC_NOTATION_PRECISION"


@dataclass(eq=False)
class AmountParseError(ValueError):
    code: AmountErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


def create_error(code: AmountErrorCode, message: str) -> AmountParseError:
    return AmountParseError(code=code, message=message)
