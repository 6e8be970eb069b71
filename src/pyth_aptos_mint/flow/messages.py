"""Display messages for mint errors."""

from typing import Dict, Iterator, Mapping, Optional, Tuple

# Pyth abort raised when the update bytes do not verify on-chain
INVALID_PRICE_UPDATE_ABORT = "0x60008"

DEFAULT_ERROR_MESSAGES: Mapping[str, str] = {
    INVALID_PRICE_UPDATE_ABORT: (
        "Error: Invalid price update data format or state verification failed"
    ),
}


class ErrorMessageTable:
    """Maps known error signatures to human readable messages.

    A signature is any substring of the raw error text, usually a Move
    abort code. Signatures are checked in registration order and the first
    match wins; errors that match nothing keep their own message.

    Example:
        ```python
        messages = ErrorMessageTable()
        messages.register("0x10006", "Error: Insufficient balance for gas")
        messages.normalize(error)
        ```
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._messages: Dict[str, str] = dict(
            DEFAULT_ERROR_MESSAGES if messages is None else messages
        )

    def register(self, signature: str, message: str) -> None:
        """Add or replace the message for an error signature."""
        if not signature:
            raise ValueError("Error signature must not be empty")
        self._messages[signature] = message

    def lookup(self, text: str) -> Optional[str]:
        """Return the message for the first signature found in text, if any."""
        for signature, message in self._messages.items():
            if signature in text:
                return message
        return None

    def normalize(self, error: BaseException) -> str:
        """Turn an error into display text."""
        abort_code = getattr(error, "abort_code", None)
        if abort_code in self._messages:
            return self._messages[abort_code]
        text = str(error) or type(error).__name__
        return self.lookup(text) or text

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._messages.items())

    def __len__(self) -> int:
        return len(self._messages)
