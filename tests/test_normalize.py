import pytest

from tokenamount.core import AmountErrorCode, AmountParseError, normalize_amount, validate_decimals
from tokenamount.core.normalize import split_amount


def test_normalize_amount():
    assert normalize_amount(" 1,234.50 ", 6) == "1234.50"
    assert normalize_amount("1.5e-3", 6) == "0.0015"
    assert normalize_amount("007", 0) == "007"


def test_sign_checked_before_format():
    with pytest.raises(AmountParseError) as exc_info:
        normalize_amount("  -abc", 6)
    assert exc_info.value.code == AmountErrorCode.NEGATIVE_AMOUNT


def test_split_amount():
    assert split_amount("12.34") == ("12", "34")
    assert split_amount("12") == ("12", "")


@pytest.mark.parametrize("decimals", [0, 6, 18, 77])
def test_validate_decimals_accepts_range(decimals):
    assert validate_decimals(decimals) == decimals


@pytest.mark.parametrize("decimals", [-1, 78, 1.0, "18", False])
def test_validate_decimals_rejects(decimals):
    with pytest.raises(AmountParseError, match="Invalid decimals value") as exc_info:
        validate_decimals(decimals)
    assert exc_info.value.code == AmountErrorCode.INVALID_DECIMALS
