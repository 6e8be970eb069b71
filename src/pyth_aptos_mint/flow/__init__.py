"""Mint flow orchestration."""

from .messages import DEFAULT_ERROR_MESSAGES, INVALID_PRICE_UPDATE_ABORT, ErrorMessageTable
from .orchestrator import MintFlow, MintOutcome, MintState, PriceOracle

__all__ = [
    "DEFAULT_ERROR_MESSAGES",
    "INVALID_PRICE_UPDATE_ABORT",
    "ErrorMessageTable",
    "MintFlow",
    "MintOutcome",
    "MintState",
    "PriceOracle",
]
