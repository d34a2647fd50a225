import logging
from typing import Dict

from ref_farming_env.schemas.config import Network, NetworkConfig, TestnetConfig
from ref_farming_env.services.config.config import (
    DEFAULT_NETWORK,
    FARMING_CONTRACT_NAME,
    FT_CONTRACT_NAME,
    NEAR_CONFIG,
    NFT_CONTRACT_NAME,
    OWNER_ACCOUNT_NAME,
    TESTNET_CONFIG,
)

logger = logging.getLogger(__name__)


def _base_config() -> NetworkConfig:
    return NetworkConfig(
        network_id=NEAR_CONFIG['NETWORK_ID'],
        node_url=NEAR_CONFIG['NODE_URL'],
        wallet_url=NEAR_CONFIG['WALLET_URL'],
        helper_url=NEAR_CONFIG['HELPER_URL'],
        farming_contract_name=FARMING_CONTRACT_NAME,
        nft_contract_name=NFT_CONTRACT_NAME,
        ft_contract_name=FT_CONTRACT_NAME,
        owner_account_name=OWNER_ACCOUNT_NAME,
    )


def get_config(network: str = DEFAULT_NETWORK) -> Dict[str, str]:
    """
    Return the near-api config for the farming test environment.

    Only "testnet" adds keys (explorer url, gas limits, account amounts and
    the guests account secret). Every other name, "mainnet" included, gets
    the base record, whose endpoints always point at testnet.
    """
    config = _base_config()

    if network == Network.TESTNET:
        logger.debug(f"Building testnet config for {config.network_id}")
        config = TestnetConfig.from_base(
            config,
            explorer_url=TESTNET_CONFIG['EXPLORER_URL'],
            gas_default=TESTNET_CONFIG['GAS'],
            gas=TESTNET_CONFIG['GAS'],
            gas_max=TESTNET_CONFIG['GAS_MAX'],
            default_new_account_amount=TESTNET_CONFIG['DEFAULT_NEW_ACCOUNT_AMOUNT'],
            default_new_contract_amount=TESTNET_CONFIG['DEFAULT_NEW_CONTRACT_AMOUNT'],
            guests_account_secret=TESTNET_CONFIG['GUESTS_ACCOUNT_SECRET'],
        )
    else:
        logger.debug(f"No config branch for network {network!r}, using base config")

    return config.model_dump(by_alias=True)
