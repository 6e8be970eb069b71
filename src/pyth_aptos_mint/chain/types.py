"""Chain Types for the Aptos mint transaction."""

from dataclasses import dataclass, field
from typing import Any, List

from aptos_sdk.account import Account

from ..oracle.encoding import EncodedPricePayload
from .utils import (
    MINT_AMOUNT_USD,
    MINT_FUNCTION_NAME,
    MINT_MODULE_NAME,
    MODULE_ADDRESS,
    format_function_id,
)


@dataclass(frozen=True)
class EntryFunctionId:
    """Fully qualified on-chain entry function."""

    module_address: str
    """Account address the module is published under."""

    module_name: str
    """Move module name (e.g., "btc_pegged_coin")."""

    function_name: str
    """Entry function name (e.g., "mint_coins")."""

    @property
    def module(self) -> str:
        """Module ID as "<address>::<module>"."""
        return f"{self.module_address}::{self.module_name}"

    def __str__(self) -> str:
        return format_function_id(
            self.module_address, self.module_name, self.function_name
        )

    @classmethod
    def parse(cls, value: str) -> "EntryFunctionId":
        """Parse "<address>::<module>::<function>".

        Raises:
            ValueError: If value does not have exactly three parts
        """
        parts = value.split("::")
        if len(parts) != 3 or not all(parts):
            raise ValueError(f"Invalid entry function ID: {value!r}")
        return cls(*parts)

    @classmethod
    def mint(cls, module_address: str = MODULE_ADDRESS) -> "EntryFunctionId":
        """The mint entry point published under module_address."""
        return cls(module_address, MINT_MODULE_NAME, MINT_FUNCTION_NAME)


@dataclass(frozen=True)
class MintIntent:
    """Complete argument set for one call to the mint entry point."""

    payload: EncodedPricePayload
    """Encoded price update, always a single-element list."""

    amount: int = MINT_AMOUNT_USD
    """Amount in USD to mint."""

    def __post_init__(self) -> None:
        if len(self.payload) != 1:
            raise ValueError(
                f"Expected exactly one price update, got {len(self.payload)}"
            )
        if self.amount < 0:
            raise ValueError(f"Invalid mint amount: {self.amount}")

    @property
    def function_arguments(self) -> List[Any]:
        """Arguments in entry point order: (u64 amount, vector<vector<u8>>)."""
        return [self.amount, self.payload]


@dataclass(frozen=True)
class SigningIdentity:
    """Account that signs mint transactions. Loaded once, never mutated."""

    address: str
    """Account address (0x-prefixed hex)."""

    account: Account = field(repr=False)
    """Aptos account holding the Ed25519 private key."""


@dataclass(frozen=True)
class SubmittedTransaction:
    """Transaction accepted by the node but not yet confirmed."""

    hash: str
    sender: str
