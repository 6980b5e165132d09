"""Tests for the chain metadata table."""

from __future__ import annotations

import pytest

from onramp_mcp.chains import BUYABLE_CHAINS_MAP, ChainId, get_chain_metadata
from onramp_mcp.errors import UnsupportedChainError


class TestChainTable:
    """Tests for BUYABLE_CHAINS_MAP."""

    def test_table_is_read_only(self) -> None:
        """The table cannot be modified."""
        with pytest.raises(TypeError):
            BUYABLE_CHAINS_MAP["0x999"] = BUYABLE_CHAINS_MAP[ChainId.MAINNET]  # type: ignore[index]

    def test_records_are_frozen(self) -> None:
        """Records cannot be modified."""
        with pytest.raises(AttributeError):
            BUYABLE_CHAINS_MAP[ChainId.MAINNET].network = "other"  # type: ignore[misc]

    def test_records_are_keyed_by_their_chain_id(self) -> None:
        """Every record carries the id it is stored under."""
        for chain_id, chain in BUYABLE_CHAINS_MAP.items():
            assert chain.chain_id == chain_id

    def test_mainnet_has_all_provider_fields(self) -> None:
        """Mainnet is buyable through every provider."""
        chain = BUYABLE_CHAINS_MAP[ChainId.MAINNET]
        assert chain.wyre is not None
        assert chain.wyre.srn == "ethereum"
        assert chain.moonpay is not None
        assert chain.transak_currencies[0] == "ETH"
        assert chain.coinbase_pay_currencies

    def test_testnets_have_no_provider_fields(self) -> None:
        """Testnets are only served by faucets."""
        for chain_id in (ChainId.ROPSTEN, ChainId.RINKEBY, ChainId.KOVAN, ChainId.GOERLI):
            chain = BUYABLE_CHAINS_MAP[chain_id]
            assert chain.wyre is None
            assert chain.moonpay is None
            assert chain.transak_currencies == ()


class TestGetChainMetadata:
    """Tests for get_chain_metadata."""

    def test_known_chain(self) -> None:
        """Known chains return their record."""
        assert get_chain_metadata(ChainId.POLYGON).network == "polygon"

    def test_unknown_chain(self) -> None:
        """Unknown chains raise UnsupportedChainError naming the service."""
        with pytest.raises(UnsupportedChainError, match="transak") as exc_info:
            get_chain_metadata("0x12345", "transak")
        assert exc_info.value.chain_id == "0x12345"
