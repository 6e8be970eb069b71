"""Error taxonomy for the mint flow.

Every failure a mint attempt can hit is one of these. The orchestrator
catches them at its boundary and turns them into display text; nothing
below it retries.
"""

from typing import Optional


class MintError(Exception):
    """Base class for all mint flow errors."""


class ConfigurationError(MintError):
    """Configuration is missing or invalid. The flow cannot start."""


class NetworkError(MintError):
    """The oracle service or chain node could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidAttestationFormat(MintError):
    """The oracle response did not carry a usable binary attestation."""


class BuildError(MintError):
    """The unsigned transaction could not be built."""


class SubmissionError(MintError):
    """The signed transaction was rejected on submission."""


class ExecutionError(MintError):
    """The transaction was committed but aborted on-chain."""

    def __init__(
        self,
        message: str,
        tx_hash: Optional[str] = None,
        abort_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.tx_hash = tx_hash
        self.abort_code = abort_code


__all__ = [
    "MintError",
    "ConfigurationError",
    "NetworkError",
    "InvalidAttestationFormat",
    "BuildError",
    "SubmissionError",
    "ExecutionError",
]
