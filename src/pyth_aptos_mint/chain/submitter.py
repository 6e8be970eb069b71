"""Mint transaction submission.

Three steps, each failing on its own: build the unsigned transaction,
sign and submit it, wait for it to be committed. Nothing is retried and
a later step never runs once an earlier one has failed.
"""

import logging
from typing import Any, Type

import httpx

from ..errors import (
    BuildError,
    ExecutionError,
    MintError,
    NetworkError,
    SubmissionError,
)
from .client import ChainClient
from .types import EntryFunctionId, MintIntent, SigningIdentity, SubmittedTransaction
from .utils import parse_abort_code

logger = logging.getLogger(__name__)


def _error_message(error: BaseException) -> str:
    return str(error) or type(error).__name__


def _classify(error: Exception, step_error: Type[MintError]) -> MintError:
    if isinstance(error, httpx.TransportError):
        return NetworkError(_error_message(error))
    return step_error(_error_message(error))


class TransactionSubmitter:
    """Submits mint transactions for a fixed entry function.

    Example:
        ```python
        submitter = TransactionSubmitter(
            AptosChainClient(NODE_URLS["testnet"]),
            EntryFunctionId.mint(),
        )
        tx_hash = await submitter.submit_mint(MintIntent(payload), identity)
        ```
    """

    def __init__(self, chain_client: ChainClient, function: EntryFunctionId):
        self.chain_client = chain_client
        self.function = function

    async def build(self, intent: MintIntent, identity: SigningIdentity) -> Any:
        """Build the unsigned mint transaction.

        Raises:
            BuildError: If the transaction cannot be built
            NetworkError: If the node is unreachable
        """
        try:
            transaction = await self.chain_client.build_transaction(
                identity,
                self.function,
                [],
                intent.function_arguments,
            )
        except MintError:
            raise
        except Exception as e:
            raise _classify(e, BuildError) from e

        logger.debug("Transaction payload: %s", transaction)
        return transaction

    async def sign_and_submit(
        self, transaction: Any, identity: SigningIdentity
    ) -> SubmittedTransaction:
        """Sign a built transaction and submit it.

        Raises:
            SubmissionError: If the node rejects the transaction
            NetworkError: If the node is unreachable
        """
        try:
            tx_hash = await self.chain_client.sign_and_submit(identity, transaction)
        except MintError:
            raise
        except Exception as e:
            raise _classify(e, SubmissionError) from e

        logger.info("Transaction submitted: %s", tx_hash)
        return SubmittedTransaction(hash=tx_hash, sender=identity.address)

    async def await_finality(self, tx_hash: str) -> None:
        """Wait until tx_hash is committed.

        Raises:
            ExecutionError: If the transaction aborted; abort_code is set when
                the chain reported one
            NetworkError: If the node is unreachable
        """
        try:
            await self.chain_client.wait_for_transaction(tx_hash)
        except MintError:
            raise
        except httpx.TransportError as e:
            raise NetworkError(_error_message(e)) from e
        except Exception as e:
            message = _error_message(e)
            raise ExecutionError(
                message, tx_hash=tx_hash, abort_code=parse_abort_code(message)
            ) from e

        logger.info("Transaction confirmed: %s", tx_hash)

    async def submit_mint(self, intent: MintIntent, identity: SigningIdentity) -> str:
        """Build, sign, submit and confirm one mint transaction.

        Returns:
            Hash of the confirmed transaction
        """
        transaction = await self.build(intent, identity)
        submitted = await self.sign_and_submit(transaction, identity)
        await self.await_finality(submitted.hash)
        return submitted.hash
