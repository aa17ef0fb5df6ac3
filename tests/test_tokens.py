"""Tests for TokenRegistry."""
import logging

import pytest

from tokenamount import AmountErrorCode, AmountParseError, DEFAULT_TOKENS, TokenInfo, TokenRegistry

USDT_ETHEREUM = "0xdAC17F958D2ee523a2206206994597C13D831ec7"


class TestTokenInfo:
    def test_rejects_invalid_decimals(self):
        with pytest.raises(AmountParseError) as exc_info:
            TokenInfo(address=USDT_ETHEREUM, decimals=78)
        assert exc_info.value.code == AmountErrorCode.INVALID_DECIMALS


class TestTokenRegistry:
    def test_register_and_lookup_case_insensitive(self):
        registry = TokenRegistry().register_token("ethereum", "usdt", TokenInfo(USDT_ETHEREUM.lower(), 6))

        info = registry.get_token_info("ethereum", "Usdt")
        assert info is not None
        assert info.decimals == 6
        assert info.address == USDT_ETHEREUM
        assert registry.get_registered_tokens("ethereum") == ["USDT"]

    def test_register_rejects_bad_evm_address(self):
        with pytest.raises(ValueError, match="Invalid token address"):
            TokenRegistry().register_token("polygon", "USDT", TokenInfo("0x1234", 6))

    def test_non_evm_address_kept_verbatim(self):
        address = DEFAULT_TOKENS["tron"]["USDT"].address
        registry = TokenRegistry().register_token("tron", "USDT", TokenInfo(address, 6))
        assert registry.get_token_info("tron", "usdt").address == address

    def test_register_defaults(self):
        registry = TokenRegistry().register_defaults("ethereum").register_defaults("bnb").register_defaults("bitcoin")

        assert sorted(registry.get_registered_tokens("ethereum")) == ["USDT", "XAUT"]
        assert registry.get_token_info("bnb", "USDT").decimals == 18
        assert registry.get_registered_tokens("bitcoin") == []

    def test_unknown_lookups(self):
        registry = TokenRegistry()
        assert registry.get_token_info("ethereum", "USDT") is None
        assert registry.get_registered_tokens("ethereum") == []
        assert registry.get_token_info("sepolia", "USDT") is None
        assert registry.get_registered_tokens("sepolia") == []
        registry.register_defaults("sepolia")
        assert registry.get_registered_tokens("sepolia") == []

    def test_any_chain_name_can_hold_tokens(self):
        registry = TokenRegistry().register_token("Sepolia ", "test", TokenInfo("not-validated", 8))

        assert registry.get_registered_tokens("sepolia") == ["TEST"]
        assert registry.get_token_info("SEPOLIA", "Test").address == "not-validated"
        assert registry.parse_amount("sepolia", "TEST", "0.5") == 50000000

    @pytest.mark.parametrize("chain", ["", "   ", None, 1])
    def test_rejects_blank_or_non_string_chain(self, chain):
        with pytest.raises(ValueError, match="Invalid chain"):
            TokenRegistry().get_registered_tokens(chain)

    def test_require_token_info_lists_available(self):
        registry = TokenRegistry().register_defaults("ethereum")
        with pytest.raises(ValueError, match="Available tokens: USDT, XAUT"):
            registry.require_token_info("ethereum", "DAI")
        with pytest.raises(ValueError, match="Available tokens: none"):
            registry.require_token_info("polygon", "USDT")

    def test_parse_and_format_amount(self):
        registry = TokenRegistry().register_defaults("ethereum").register_defaults("bnb")

        assert registry.parse_amount("ethereum", "usdt", "94.42884") == 94428840
        assert registry.format_amount("ethereum", "USDT", 94428840) == "94.42884"
        assert registry.parse_amount("bnb", "USDT", "1.5") == 15 * 10**17
        assert registry.format_amount("bnb", "USDT", 15 * 10**17) == "1.5"

    def test_parse_amount_uses_token_precision(self):
        registry = TokenRegistry().register_defaults("ethereum")
        with pytest.raises(AmountParseError) as exc_info:
            registry.parse_amount("ethereum", "USDT", "0.0000001")
        assert exc_info.value.code == AmountErrorCode.EXCESSIVE_PRECISION

    def test_registration_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tokenamount.tokens.registry"):
            TokenRegistry().register_defaults("polygon")
        assert "Registered USDT on polygon" in caplog.text
