from ref_farming_env.schemas.config import Network, NetworkConfig, TestnetConfig
from ref_farming_env.services.config.config import (
    FARMING_CONTRACT_NAME,
    FT_CONTRACT_NAME,
    NFT_CONTRACT_NAME,
    OWNER_ACCOUNT_NAME,
)
from ref_farming_env.services.networks.near import get_config

__all__ = [
    "get_config",
    "Network",
    "NetworkConfig",
    "TestnetConfig",
    "FARMING_CONTRACT_NAME",
    "NFT_CONTRACT_NAME",
    "FT_CONTRACT_NAME",
    "OWNER_ACCOUNT_NAME",
]
