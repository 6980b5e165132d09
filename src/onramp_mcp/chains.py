"""Static per-chain metadata for on-ramp providers.

The table is built once at import and exposed read-only. Providers look up
the record for a chain id and read only the fields they need.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from onramp_mcp.errors import UnsupportedChainError


class ChainId:
    """Hex chain identifiers."""

    MAINNET = "0x1"
    ROPSTEN = "0x3"
    RINKEBY = "0x4"
    GOERLI = "0x5"
    KOVAN = "0x2a"
    BSC = "0x38"
    POLYGON = "0x89"
    AVALANCHE = "0xa86a"
    FANTOM = "0xfa"
    CELO = "0xa4ec"


ETH_SYMBOL = "ETH"
TEST_ETH_SYMBOL = "TESTETH"
BNB_SYMBOL = "BNB"
MATIC_SYMBOL = "MATIC"
AVALANCHE_SYMBOL = "AVAX"
FANTOM_SYMBOL = "FTM"
CELO_SYMBOL = "CELO"

ETHEREUM_NETWORK_NAME = "ethereum"


@dataclass(frozen=True)
class WyreCodes:
    """Wyre destination codes for a chain."""

    srn: str
    currency_code: str


@dataclass(frozen=True)
class MoonPayCodes:
    """MoonPay currency codes for a chain."""

    default_currency_code: str
    show_only_currencies: str


@dataclass(frozen=True)
class ChainMetadata:
    """Provider-specific metadata for one buyable chain."""

    chain_id: str
    native_currency: str
    network: str
    transak_currencies: tuple[str, ...] = ()
    moonpay: MoonPayCodes | None = None
    wyre: WyreCodes | None = None
    coinbase_pay_currencies: tuple[str, ...] = ()


def _testnet(chain_id: str) -> ChainMetadata:
    return ChainMetadata(
        chain_id=chain_id,
        native_currency=TEST_ETH_SYMBOL,
        network=ETHEREUM_NETWORK_NAME,
    )


BUYABLE_CHAINS_MAP: Mapping[str, ChainMetadata] = MappingProxyType(
    {
        ChainId.MAINNET: ChainMetadata(
            chain_id=ChainId.MAINNET,
            native_currency=ETH_SYMBOL,
            network=ETHEREUM_NETWORK_NAME,
            transak_currencies=(ETH_SYMBOL, "USDT", "USDC", "DAI"),
            moonpay=MoonPayCodes(
                default_currency_code="eth",
                show_only_currencies="eth,usdt,usdc,dai",
            ),
            wyre=WyreCodes(srn="ethereum", currency_code=ETH_SYMBOL),
            coinbase_pay_currencies=(ETH_SYMBOL, "USDC", "DAI"),
        ),
        ChainId.ROPSTEN: _testnet(ChainId.ROPSTEN),
        ChainId.RINKEBY: _testnet(ChainId.RINKEBY),
        ChainId.GOERLI: _testnet(ChainId.GOERLI),
        ChainId.KOVAN: _testnet(ChainId.KOVAN),
        ChainId.BSC: ChainMetadata(
            chain_id=ChainId.BSC,
            native_currency=BNB_SYMBOL,
            network="bsc",
            transak_currencies=(BNB_SYMBOL, "BUSD"),
            moonpay=MoonPayCodes(
                default_currency_code="bnb_bsc",
                show_only_currencies="bnb_bsc,busd_bsc",
            ),
            coinbase_pay_currencies=(BNB_SYMBOL, "BUSD"),
        ),
        ChainId.POLYGON: ChainMetadata(
            chain_id=ChainId.POLYGON,
            native_currency=MATIC_SYMBOL,
            network="polygon",
            transak_currencies=(MATIC_SYMBOL, "USDT", "USDC", "DAI"),
            moonpay=MoonPayCodes(
                default_currency_code="matic_polygon",
                show_only_currencies="matic_polygon,usdc_polygon",
            ),
            wyre=WyreCodes(srn="matic", currency_code=MATIC_SYMBOL),
            coinbase_pay_currencies=(MATIC_SYMBOL, "USDC"),
        ),
        ChainId.AVALANCHE: ChainMetadata(
            chain_id=ChainId.AVALANCHE,
            native_currency=AVALANCHE_SYMBOL,
            network="avaxcchain",
            transak_currencies=(AVALANCHE_SYMBOL,),
            moonpay=MoonPayCodes(
                default_currency_code="avax_cchain",
                show_only_currencies="avax_cchain",
            ),
            wyre=WyreCodes(srn="avalanche", currency_code=AVALANCHE_SYMBOL),
            coinbase_pay_currencies=(AVALANCHE_SYMBOL,),
        ),
        ChainId.FANTOM: ChainMetadata(
            chain_id=ChainId.FANTOM,
            native_currency=FANTOM_SYMBOL,
            network="fantom",
            transak_currencies=(FANTOM_SYMBOL,),
        ),
        ChainId.CELO: ChainMetadata(
            chain_id=ChainId.CELO,
            native_currency=CELO_SYMBOL,
            network="celo",
            transak_currencies=(CELO_SYMBOL,),
            moonpay=MoonPayCodes(
                default_currency_code="celo",
                show_only_currencies="celo",
            ),
        ),
    }
)


def get_chain_metadata(chain_id: str, service: str | None = None) -> ChainMetadata:
    """Look up the metadata record for a chain.

    Args:
        chain_id: Hex chain identifier (e.g. "0x1")
        service: Service asking for the record, used in the error message

    Returns:
        The chain's metadata record

    Raises:
        UnsupportedChainError: If the chain is not in the table
    """
    try:
        return BUYABLE_CHAINS_MAP[chain_id]
    except KeyError:
        raise UnsupportedChainError(chain_id, service) from None
