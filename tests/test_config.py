import pytest
from pydantic import ValidationError

from ref_farming_env import (
    FARMING_CONTRACT_NAME,
    FT_CONTRACT_NAME,
    NFT_CONTRACT_NAME,
    OWNER_ACCOUNT_NAME,
    Network,
    NetworkConfig,
    get_config,
)

BASE_KEYS = [
    "networkId",
    "nodeUrl",
    "walletUrl",
    "helperUrl",
    "farmingContractName",
    "nftContractName",
    "ftContractName",
    "ownerAccountName",
]

TESTNET_KEYS = [
    "explorerUrl",
    *BASE_KEYS,
    "GAS",
    "gas",
    "gas_max",
    "DEFAULT_NEW_ACCOUNT_AMOUNT",
    "DEFAULT_NEW_CONTRACT_AMOUNT",
    "GUESTS_ACCOUNT_SECRET",
]


def test_default_config_has_base_keys_only():
    config = get_config()
    assert list(config) == BASE_KEYS
    assert config["networkId"] == "testnet"
    assert config["nodeUrl"] == "https://rpc.testnet.near.org"
    assert config["walletUrl"] == "https://wallet.testnet.near.org"
    assert config["helperUrl"] == "https://helper.testnet.near.org"


def test_base_config_uses_contract_constants():
    config = get_config()
    assert config["farmingContractName"] == FARMING_CONTRACT_NAME == "dev-1649371698726-40356935804134"
    assert config["nftContractName"] == NFT_CONTRACT_NAME == "dev-1649259045266-73594760682734"
    assert config["ftContractName"] == FT_CONTRACT_NAME == "dev-1649119497564-55770252445071"


def test_mainnet_is_not_special_cased():
    assert get_config("mainnet") == get_config()


@pytest.mark.parametrize("network", ["anything-else", "", "TESTNET", "betanet", Network.MAINNET])
def test_unknown_networks_fall_through_to_base(network):
    assert get_config(network) == get_config("mainnet")


def test_testnet_config():
    config = get_config("testnet")
    assert list(config) == TESTNET_KEYS
    assert len(config) == 15
    assert config["explorerUrl"] == "https://explorer.testnet.near.org"
    assert config["GAS"] == "200000000000000"
    assert config["gas"] == "200000000000000"
    assert config["gas_max"] == "300000000000000"
    assert config["DEFAULT_NEW_ACCOUNT_AMOUNT"] == "2"
    assert config["DEFAULT_NEW_CONTRACT_AMOUNT"] == "5"
    assert config["GUESTS_ACCOUNT_SECRET"] == "7UVfzoKZL4WZGF98C3Ue7tmmA6QamHCiB1Wd5pkxVPAc7j6jf3HXz5Y9cR93Y68BfGDtMLQ9Q29Njw5ZtzGhPxv"


def test_testnet_keeps_base_values():
    base = get_config()
    testnet = get_config("testnet")
    assert {key: testnet[key] for key in BASE_KEYS} == base


def test_network_enum_selects_testnet_branch():
    assert get_config(Network.TESTNET) == get_config("testnet")


@pytest.mark.parametrize("network", ["mainnet", "testnet", "other"])
def test_owner_account_name_is_constant(network):
    assert get_config(network)["ownerAccountName"] == OWNER_ACCOUNT_NAME == "pruebaprueba.testnet"


@pytest.mark.parametrize("network", ["mainnet", "testnet"])
def test_each_call_returns_a_fresh_dict(network):
    first = get_config(network)
    second = get_config(network)
    assert first == second
    assert first is not second

    first["nodeUrl"] = "http://localhost:3030"
    assert get_config(network)["nodeUrl"] == "https://rpc.testnet.near.org"


def test_config_record_is_frozen():
    record = NetworkConfig(**get_config())
    with pytest.raises(ValidationError):
        record.node_url = "http://localhost:3030"
