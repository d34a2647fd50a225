from enum import Enum
from pydantic import BaseModel, Field


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


class NetworkConfig(BaseModel):
    network_id: str = Field(..., alias="networkId")
    node_url: str = Field(..., alias="nodeUrl")
    wallet_url: str = Field(..., alias="walletUrl")
    helper_url: str = Field(..., alias="helperUrl")
    farming_contract_name: str = Field(..., alias="farmingContractName")
    nft_contract_name: str = Field(..., alias="nftContractName")
    ft_contract_name: str = Field(..., alias="ftContractName")
    owner_account_name: str = Field(..., alias="ownerAccountName")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


class TestnetConfig(BaseModel):
    """
    Testnet record. Field order is the key order of the dumped dict:
    explorer url first, then the base fields, then gas and account amounts.
    """
    __test__ = False

    explorer_url: str = Field(..., alias="explorerUrl")
    network_id: str = Field(..., alias="networkId")
    node_url: str = Field(..., alias="nodeUrl")
    wallet_url: str = Field(..., alias="walletUrl")
    helper_url: str = Field(..., alias="helperUrl")
    farming_contract_name: str = Field(..., alias="farmingContractName")
    nft_contract_name: str = Field(..., alias="nftContractName")
    ft_contract_name: str = Field(..., alias="ftContractName")
    owner_account_name: str = Field(..., alias="ownerAccountName")
    gas_default: str = Field(..., alias="GAS")
    gas: str = Field(..., alias="gas")
    gas_max: str = Field(..., alias="gas_max")
    default_new_account_amount: str = Field(..., alias="DEFAULT_NEW_ACCOUNT_AMOUNT")
    default_new_contract_amount: str = Field(..., alias="DEFAULT_NEW_CONTRACT_AMOUNT")
    guests_account_secret: str = Field(..., alias="GUESTS_ACCOUNT_SECRET")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @classmethod
    def from_base(cls, base: NetworkConfig, **extra) -> "TestnetConfig":
        """Build from a base record; base fields override anything passed in ``extra``."""
        fields = dict(extra)
        fields.update(base.model_dump())
        return cls(**fields)
