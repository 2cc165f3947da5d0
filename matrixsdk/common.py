"""Shared helpers and the error hierarchy used across the SDK."""

from __future__ import annotations

import logging
import os
import random
import re
import time

logger = logging.getLogger(__name__)

TX_VERSION = 3

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")

_rng = random.Random()


class SdkError(Exception):
    """Base class for errors raised by the SDK."""

    default_message = "sdk error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidAmountError(SdkError, ValueError):
    default_message = "invalid amount"


class TxNotFoundError(SdkError, LookupError):
    default_message = "tx not found"


class InvalidAccountError(SdkError, ValueError):
    default_message = "invalid account"


class InvalidContractAccountError(SdkError, ValueError):
    default_message = "conrtact account must be numbers of length 16"


class AmountNotEnoughError(SdkError, ValueError):
    default_message = "Amount must be bigger than compliancecheck fee which is 10"


class InvalidInitiatorError(SdkError, ValueError):
    default_message = "From account can not be nil"


class InvalidParamError(SdkError, ValueError):
    default_message = "Parmeter invalid"


def get_nonce() -> str:
    """Return a nonce: the Unix time followed by an 8-wide random number."""
    return f"{int(time.time())}{_rng.randrange(100_000_000):8d}"


def set_seed() -> None:
    """Reseed the nonce generator from the operating system's entropy source."""
    seed = int.from_bytes(os.urandom(8), "big", signed=True)
    _rng.seed(seed)


def path_exists_and_mkdir(path: str | os.PathLike[str]) -> None:
    """Create the directory ``path`` unless something already exists there."""
    try:
        os.stat(path)
    except OSError:
        os.mkdir(path, 0o777)


def _parse_int64(text: str) -> int:
    if not _DECIMAL_INT.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def is_valid_amount(amount: str) -> str | None:
    """Return the normalised amount, or ``None`` if it is not a valid amount.

    An empty amount counts as ``"0"``; negative numbers and anything that is
    not a 64-bit decimal integer are rejected.
    """
    if amount == "":
        return "0"
    try:
        value = _parse_int64(amount)
    except ValueError as exc:
        logger.info("Transfer amount to int64 err: %s", exc)
        return None
    if value < 0:
        logger.info("Transfer amount is negative")
        return None
    return amount