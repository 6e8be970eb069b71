"""Mint flow orchestration.

Runs one mint attempt as a fixed sequence of steps:

    IDLE -> FETCHING -> ENCODING -> SUBMITTING -> AWAITING_FINALITY -> SUCCESS | FAILED

Each step starts only after the previous one has returned. Any failure
jumps straight to FAILED with a display message; the next attempt starts
over from IDLE with no state carried across.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Literal, Optional, Protocol

from ..chain.client import AptosChainClient
from ..chain.signing import load_signing_identity
from ..chain.submitter import TransactionSubmitter
from ..chain.types import MintIntent, SigningIdentity
from ..config import MintConfig
from ..oracle.encoding import encode_price_payload
from ..oracle.hermes import HermesClient
from ..oracle.types import PriceAttestation
from ..oracle.utils import format_price
from .messages import ErrorMessageTable

logger = logging.getLogger(__name__)


class MintState(str, Enum):
    """States of a mint attempt."""

    IDLE = "idle"
    FETCHING = "fetching"
    ENCODING = "encoding"
    SUBMITTING = "submitting"
    AWAITING_FINALITY = "awaiting_finality"
    SUCCESS = "success"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (MintState.SUCCESS, MintState.FAILED)


@dataclass(frozen=True)
class MintOutcome:
    """Result of a call to MintFlow.mint()."""

    status: Literal["success", "failed", "in_progress"]
    tx_hash: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(cls, tx_hash: str) -> "MintOutcome":
        return cls(status="success", tx_hash=tx_hash)

    @classmethod
    def failed(cls, error: str) -> "MintOutcome":
        return cls(status="failed", error=error)

    @classmethod
    def in_progress(cls) -> "MintOutcome":
        return cls(status="in_progress")


class PriceOracle(Protocol):
    """Protocol for sources of signed price updates."""

    async def fetch_latest_attestation(self, feed_id: str) -> PriceAttestation:
        ...


StateListener = Callable[[MintState], None]


class MintFlow:
    """Mints the pegged coin against a fresh Pyth price update.

    One attempt runs at a time. Calling mint() while an attempt is in
    flight returns an in-progress outcome and touches nothing, so the
    signing account never has two transactions racing on its sequence
    number.

    Example:
        ```python
        flow = MintFlow.from_config(MintConfig.from_env())
        try:
            outcome = await flow.mint()
            if outcome.ok:
                print(f"Transaction successful! Hash: {outcome.tx_hash}")
            else:
                print(outcome.error)
        finally:
            await flow.close()
        ```
    """

    def __init__(
        self,
        config: MintConfig,
        oracle: PriceOracle,
        submitter: TransactionSubmitter,
        identity: SigningIdentity,
        messages: Optional[ErrorMessageTable] = None,
        on_state_change: Optional[StateListener] = None,
    ):
        """Initialize the mint flow.

        Args:
            config: Resolved mint configuration
            oracle: Source of signed price updates
            submitter: Submitter bound to the mint entry point
            identity: Account that signs the mint transaction
            messages: Error display table (default: built-in abort messages)
            on_state_change: Called with the new state on every transition
        """
        self.config = config
        self.oracle = oracle
        self.submitter = submitter
        self.identity = identity
        self.messages = messages or ErrorMessageTable()
        self._on_state_change = on_state_change

        self._state = MintState.IDLE
        self._in_flight = False
        self._tx_hash: Optional[str] = None
        self._error: Optional[str] = None

    @classmethod
    def from_config(
        cls,
        config: MintConfig,
        messages: Optional[ErrorMessageTable] = None,
        on_state_change: Optional[StateListener] = None,
    ) -> "MintFlow":
        """Wire a flow to Hermes and an Aptos fullnode.

        Raises:
            ConfigurationError: If the private key cannot be loaded
        """
        identity = load_signing_identity(config.private_key)
        oracle = HermesClient(config.hermes_url)
        submitter = TransactionSubmitter(
            AptosChainClient(config.node_url), config.mint_function
        )
        return cls(
            config,
            oracle,
            submitter,
            identity,
            messages=messages,
            on_state_change=on_state_change,
        )

    @property
    def state(self) -> MintState:
        return self._state

    @property
    def is_busy(self) -> bool:
        """True while an attempt is in flight; mint() is a no-op then."""
        return self._in_flight

    @property
    def tx_hash(self) -> Optional[str]:
        """Hash of the last successful mint, cleared when a new attempt starts."""
        return self._tx_hash

    @property
    def error(self) -> Optional[str]:
        """Display message of the last failed mint, cleared when a new attempt starts."""
        return self._error

    async def mint(self) -> MintOutcome:
        """Run one mint attempt.

        Never raises for mint failures; they come back as a failed outcome.

        Returns:
            MintOutcome with status "success" (and tx_hash), "failed" (and
            error), or "in_progress" if another attempt is still running
        """
        if self._in_flight:
            logger.debug("Mint already in progress, ignoring request")
            return MintOutcome.in_progress()

        self._in_flight = True
        try:
            self._tx_hash = None
            self._error = None
            self._transition(MintState.IDLE)

            try:
                tx_hash = await self._run()
            except Exception as e:
                message = self.messages.normalize(e)
                logger.warning("Mint failed: %s", message)
                logger.debug("Error details", exc_info=e)
                self._error = message
                self._finish(MintState.FAILED)
                return MintOutcome.failed(message)

            self._tx_hash = tx_hash
            self._finish(MintState.SUCCESS)
            return MintOutcome.success(tx_hash)
        finally:
            self._in_flight = False
            if not self._state.is_terminal and self._state is not MintState.IDLE:
                # Cancelled mid-flight; the attempt is discarded
                self._transition(MintState.IDLE)

    def reset(self) -> None:
        """Return to IDLE and clear the last result. Ignored while busy."""
        if self._in_flight:
            return
        self._tx_hash = None
        self._error = None
        self._transition(MintState.IDLE)

    async def close(self) -> None:
        """Close the oracle and chain clients."""
        for resource in (self.oracle, self.submitter.chain_client):
            close = getattr(resource, "close", None)
            if close is not None:
                await close()

    async def _run(self) -> str:
        self._transition(MintState.FETCHING)
        attestation = await self.oracle.fetch_latest_attestation(
            self.config.price_feed_id
        )
        if attestation.parsed is not None:
            logger.info(
                "Price update for %s: %s (published %d)",
                attestation.feed_id,
                format_price(attestation.parsed.price, attestation.parsed.expo),
                attestation.parsed.publish_time,
            )

        self._transition(MintState.ENCODING)
        payload = encode_price_payload(attestation)
        logger.debug("Price update bytes: %d", len(payload[0]))
        intent = MintIntent(payload=payload, amount=self.config.mint_amount)

        self._transition(MintState.SUBMITTING)
        transaction = await self.submitter.build(intent, self.identity)
        submitted = await self.submitter.sign_and_submit(transaction, self.identity)
        logger.debug("Mint %s submitted by %s", submitted.hash, submitted.sender)

        self._transition(MintState.AWAITING_FINALITY)
        await self.submitter.await_finality(submitted.hash)
        return submitted.hash

    def _finish(self, state: MintState) -> None:
        # Listeners on a terminal state must see the flow as idle again
        self._in_flight = False
        self._transition(state)

    def _transition(self, state: MintState) -> None:
        logger.debug("Mint state: %s -> %s", self._state.value, state.value)
        self._state = state
        if self._on_state_change is None:
            return
        try:
            self._on_state_change(state)
        except Exception:
            logger.exception("State listener failed")
