"""Chain identifiers and Odos V2 router addresses."""

from eth_utils import to_checksum_address

from odos_sor.errors import OdosConfigError

# Chain IDs
CHAIN_IDS = {
    "ethereum": 1,
    "optimism": 10,
    "bsc": 56,
    "polygon": 137,
    "base": 8453,
    "arbitrum": 42161,
    "avalanche": 43114,
}

# Odos SOR V2 router contracts
ODOS_V2_ROUTERS = {
    1: "0xCf5540fFFCdC3d510B18bFcA6d2b9987b0772559",
    10: "0xCa423977156BB05b13A2BA3b76Bc5419E2fE9680",
    56: "0x89b8AA89FDd0507a99d334CBe3C808fAFC7d850E",
    137: "0x4E3288c9ca110bCC82bf38F09A7b425c095d92Bf",
    8453: "0x19cEeAd7105607Cd444F5ad10dd51356436095a1",
    42161: "0xa669e7A0d4b3e4Fa48af2dE86BD4CD7126Be4e13",
    43114: "0x88de50B233052e4Fb783d4F6db78Cc34fEa3e9FC",
}


def get_chain_id(chain: str) -> int:
    """Get the EVM chain ID for a chain name (e.g. "arbitrum")."""
    try:
        return CHAIN_IDS[chain.lower()]
    except KeyError:
        raise OdosConfigError(f"Unsupported chain: {chain}") from None


def get_router_address(chain_id: int) -> str:
    """Get the checksummed Odos V2 router address for a chain ID."""
    address = ODOS_V2_ROUTERS.get(chain_id)
    if address is None:
        raise OdosConfigError(f"No Odos V2 router known for chain ID {chain_id}")
    return to_checksum_address(address)
