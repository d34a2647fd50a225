# config.py

# Contracts deployed on testnet for the farming environment
FARMING_CONTRACT_NAME = 'dev-1649371698726-40356935804134'
NFT_CONTRACT_NAME = 'dev-1649259045266-73594760682734'
FT_CONTRACT_NAME = 'dev-1649119497564-55770252445071'
OWNER_ACCOUNT_NAME = 'pruebaprueba.testnet'

# Endpoints are testnet for every network name
NEAR_CONFIG = {
    'NETWORK_ID': 'testnet',
    'NODE_URL': 'https://rpc.testnet.near.org',
    'WALLET_URL': 'https://wallet.testnet.near.org',
    'HELPER_URL': 'https://helper.testnet.near.org',
}

TESTNET_CONFIG = {
    'EXPLORER_URL': 'https://explorer.testnet.near.org',
    'GAS': '200000000000000',
    'GAS_MAX': '300000000000000',
    'DEFAULT_NEW_ACCOUNT_AMOUNT': '2',   # NEAR
    'DEFAULT_NEW_CONTRACT_AMOUNT': '5',  # NEAR
    'GUESTS_ACCOUNT_SECRET': '7UVfzoKZL4WZGF98C3Ue7tmmA6QamHCiB1Wd5pkxVPAc7j6jf3HXz5Y9cR93Y68BfGDtMLQ9Q29Njw5ZtzGhPxv',
}

DEFAULT_NETWORK = 'mainnet'
