"""Aptos chain client.

`ChainClient` is the narrow surface the submitter needs from a chain
node: build, sign-and-submit, wait. `AptosChainClient` implements it on
top of the aptos-sdk REST client and owns the mapping from plain Python
call arguments to BCS-typed transaction arguments.
"""

from typing import Any, List, Optional, Protocol

from aptos_sdk.async_client import ApiError, RestClient
from aptos_sdk.bcs import Serializer
from aptos_sdk.transactions import (
    EntryFunction,
    RawTransaction,
    SignedTransaction,
    TransactionArgument,
    TransactionPayload,
)
from aptos_sdk.type_tag import StructTag, TypeTag

from ..errors import ExecutionError
from ..oracle.encoding import payload_to_bytes
from .types import EntryFunctionId, SigningIdentity
from .utils import parse_abort_code


class ChainClient(Protocol):
    """Protocol for chain clients that can build, submit and confirm transactions."""

    async def build_transaction(
        self,
        sender: SigningIdentity,
        function: EntryFunctionId,
        type_arguments: List[str],
        function_arguments: List[Any],
    ) -> Any:
        """Build an unsigned transaction calling an entry function."""
        ...

    async def sign_and_submit(self, signer: SigningIdentity, transaction: Any) -> str:
        """Sign and submit a built transaction.

        Returns:
            Transaction hash (accepted, not yet final)
        """
        ...

    async def wait_for_transaction(self, tx_hash: str) -> None:
        """Block until tx_hash is committed; raise if it aborted."""
        ...


def to_transaction_argument(value: Any) -> TransactionArgument:
    """Map a Python value to a BCS transaction argument.

    Supported mappings:
        int -> u64
        bytes -> vector<u8>
        List[int] -> vector<u8>
        List[bytes] / List[List[int]] -> vector<vector<u8>>

    Raises:
        TypeError: If the value has no mapping
    """
    if isinstance(value, bool):
        return TransactionArgument(value, Serializer.bool)
    if isinstance(value, int):
        return TransactionArgument(value, Serializer.u64)
    if isinstance(value, (bytes, bytearray)):
        return TransactionArgument(bytes(value), Serializer.to_bytes)
    if isinstance(value, list):
        if all(isinstance(item, int) for item in value):
            return TransactionArgument(bytes(value), Serializer.to_bytes)
        if all(isinstance(item, (bytes, bytearray, list)) for item in value):
            return TransactionArgument(
                payload_to_bytes(value),
                Serializer.sequence_serializer(Serializer.to_bytes),
            )
    raise TypeError(f"Unsupported transaction argument: {value!r}")


class AptosChainClient:
    """ChainClient backed by an Aptos fullnode REST API."""

    def __init__(self, node_url: str, rest_client: Optional[RestClient] = None):
        """Initialize the Aptos chain client.

        Args:
            node_url: Fullnode REST URL (e.g., "https://fullnode.testnet.aptoslabs.com/v1")
            rest_client: Optional pre-built aptos-sdk RestClient
        """
        self.node_url = node_url
        self._rest = rest_client or RestClient(node_url)

    async def build_transaction(
        self,
        sender: SigningIdentity,
        function: EntryFunctionId,
        type_arguments: List[str],
        function_arguments: List[Any],
    ) -> RawTransaction:
        payload = EntryFunction.natural(
            function.module,
            function.function_name,
            [TypeTag(StructTag.from_str(t)) for t in type_arguments],
            [to_transaction_argument(arg) for arg in function_arguments],
        )
        return await self._rest.create_bcs_transaction(
            sender.account, TransactionPayload(payload)
        )

    async def sign_and_submit(
        self, signer: SigningIdentity, transaction: RawTransaction
    ) -> str:
        authenticator = signer.account.sign_transaction(transaction)
        return await self._rest.submit_bcs_transaction(
            SignedTransaction(transaction, authenticator)
        )

    async def wait_for_transaction(self, tx_hash: str) -> None:
        try:
            await self._rest.wait_for_transaction(tx_hash)
        except (ApiError, AssertionError) as e:
            # The SDK reports aborts and timeouts with the raw response text
            message = str(e)
            raise ExecutionError(
                message, tx_hash=tx_hash, abort_code=parse_abort_code(message)
            ) from e

    async def close(self) -> None:
        await self._rest.close()
