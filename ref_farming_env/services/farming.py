import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

MIN_SEED_DEPOSIT = 1_000_000_000_000_000_000
MAX_ACCOUNT_LENGTH = 64

# Gas attached to cross-contract calls made by the farming contract
GAS_FOR_FT_TRANSFER = 10_000_000_000_000
GAS_FOR_NFT_TRANSFER = 50_000_000_000_000
GAS_FOR_RESOLVE_TRANSFER = 50_000_000_000_000

MFT_TAG = "@"
FT_INDEX_TAG = "$"
NFT_DELIMETER = "@"
PARAS_SERIES_DELIMETER = ":"
FARM_ID_DELIMETER = "#"

ERR33_INVALID_SEED_ID = "E33: invalid seed id"
ERR42_INVALID_FARM_ID = "E42: invalid farm id"


def parse_seed_id(seed_id: str) -> Tuple[str, str]:
    """Return (receiver_id, token_id). Multi-fungible seeds are not supported."""
    parts = seed_id.split(MFT_TAG)
    if len(parts) != 1:
        raise ValueError(ERR33_INVALID_SEED_ID)
    return parts[0], parts[0]


def gen_farm_id(seed_id: str, index: int) -> str:
    return f"{seed_id}{FARM_ID_DELIMETER}{index}"


def parse_farm_id(farm_id: str) -> Tuple[str, int]:
    parts = farm_id.split(FARM_ID_DELIMETER)
    if len(parts) != 2 or not parts[1].isdecimal():
        raise ValueError(ERR42_INVALID_FARM_ID)
    return parts[0], int(parts[1])


def to_nano(timestamp: int) -> int:
    return timestamp * 10 ** 9


def to_sec(timestamp: int) -> int:
    return timestamp // 10 ** 9


def get_nft_balance_equivalent(nft_balance: Dict[str, int], nft_staked: str) -> Optional[int]:
    """
    Look up the seed balance an NFT counts for.

    ``nft_balance`` maps a contract id, a ``contract@series`` id or a full
    token id to a balance. A staked token like ``x.paras.near@1:1`` is tried
    as-is, then as ``x.paras.near@1``, then as ``x.paras.near``.
    """
    if nft_staked in nft_balance:
        return nft_balance[nft_staked]

    if PARAS_SERIES_DELIMETER in nft_staked:
        series_id = nft_staked.split(PARAS_SERIES_DELIMETER)[0]
        if series_id in nft_balance:
            return nft_balance[series_id]

    contract_id = nft_staked.split(NFT_DELIMETER)[0]
    if contract_id in nft_balance:
        return nft_balance[contract_id]

    logger.debug(f"No balance equivalent for nft {nft_staked}")
    return None
