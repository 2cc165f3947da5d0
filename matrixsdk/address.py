"""Conversion between chain addresses and EVM addresses."""

from __future__ import annotations

import binascii
import hashlib
import re
from enum import Enum

_EVM_ADDRESS_FILLER = "-"
_CONTRACT_NAME_PREFIX = "1111"
_CONTRACT_ACCOUNT_PREFIX = "1112"
_ACCOUNT_PREFIX = "XC"
_ACCOUNT_SIZE = 16
_CONTRACT_NAME_MAX_SIZE = 16
_CONTRACT_NAME_MIN_SIZE = 4
_WORD160_LENGTH = 20

_CONTRACT_NAME_RE = re.compile(r"[a-zA-Z_][0-9a-zA-Z_.]+[0-9a-zA-Z_]")

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_INDEX = {ch: i for i, ch in enumerate(_ALPHABET)}


class AddressType(str, Enum):
    XCHAIN = "xchain"
    CONTRACT_NAME = "contract-name"
    CONTRACT_ACCOUNT = "contract-account"


def base58_encode(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet."""
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, rem = divmod(number, 58)
        digits.append(_ALPHABET[rem])
    zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * zeros + "".join(reversed(digits))


def base58_decode(text: str) -> bytes:
    """Decode Bitcoin base58 text; raise ``ValueError`` on a bad character."""
    number = 0
    for ch in text:
        try:
            number = number * 58 + _ALPHABET_INDEX[ch]
        except KeyError:
            raise ValueError(f"invalid base58 character {ch!r}") from None
    zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * zeros + body


def using_sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def double_sha256(data: bytes) -> bytes:
    """Return SHA-256 applied twice to ``data``."""
    return using_sha256(using_sha256(data))


def _address_from_bytes(raw: bytes) -> bytes:
    if len(raw) != _WORD160_LENGTH:
        raise ValueError(
            f"slice passed as address '{raw.hex().upper()}' has {len(raw)} bytes "
            f"but should have {_WORD160_LENGTH} bytes"
        )
    return bytes(raw)


def _valid_raw_account(name: str) -> bool:
    return len(name) == _ACCOUNT_SIZE and all("0" <= ch <= "9" for ch in name)


def _is_account(name: str) -> int:
    if name == "":
        return -1
    if not name.startswith(_ACCOUNT_PREFIX):
        return 0
    number = name.split("@")[0][len(_ACCOUNT_PREFIX):]
    return 1 if _valid_raw_account(number) else 0


def _is_contract_account(account: str) -> bool:
    return _is_account(account) == 1 and "@xuper" in account


def _is_contract_name(name: str) -> bool:
    size = len(name.encode("utf-8"))
    if not _CONTRACT_NAME_MIN_SIZE <= size <= _CONTRACT_NAME_MAX_SIZE:
        return False
    return _CONTRACT_NAME_RE.fullmatch(name) is not None


def _xchain_ak_to_evm(addr: str) -> bytes:
    try:
        raw = base58_decode(addr)
    except ValueError:
        raw = b""
    if len(raw) < 21:
        raise ValueError("bad address")
    return _address_from_bytes(raw[1:21])


def _contract_name_to_evm(name: str) -> bytes:
    filler_count = _WORD160_LENGTH - len(name.encode("utf-8")) - 4
    padded = _CONTRACT_NAME_PREFIX + _EVM_ADDRESS_FILLER * max(filler_count, 0) + name
    return _address_from_bytes(padded.encode("utf-8"))


def _contract_account_to_evm(account: str) -> bytes:
    return _address_from_bytes((_CONTRACT_ACCOUNT_PREFIX + account[2:18]).encode("utf-8"))


def xchain_to_evm_address(xchain_addr: str) -> tuple[str, AddressType]:
    """Convert a contract account, contract name or AK address to an EVM address.

    Returns the upper-case hex address and the kind of the input.
    """
    if _is_contract_account(xchain_addr):
        addr, kind = _contract_account_to_evm(xchain_addr), AddressType.CONTRACT_ACCOUNT
    elif _is_contract_name(xchain_addr):
        addr, kind = _contract_name_to_evm(xchain_addr), AddressType.CONTRACT_NAME
    else:
        addr, kind = _xchain_ak_to_evm(xchain_addr), AddressType.XCHAIN
    return addr.hex().upper(), kind


def _evm_to_xchain_ak(addr: bytes) -> str:
    payload = bytes([1]) + addr
    return base58_encode(payload + double_sha256(payload)[:4])


def _evm_to_contract_name(addr: bytes) -> str:
    text = addr.decode("latin-1")
    return text[text.rfind(_EVM_ADDRESS_FILLER) + 1:]


def _evm_to_contract_account(addr: bytes) -> str:
    return _ACCOUNT_PREFIX + addr.decode("latin-1")[4:] + "@xuper"


def evm_to_xchain_address(evm_addr: str) -> tuple[str, AddressType]:
    """Convert a hex EVM address back to a chain address and its kind."""
    try:
        raw = binascii.unhexlify(evm_addr)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid hex address {evm_addr!r}") from exc
    addr = _address_from_bytes(raw)
    prefix = addr[:4].decode("latin-1")
    if prefix == _CONTRACT_ACCOUNT_PREFIX:
        return _evm_to_contract_account(addr), AddressType.CONTRACT_ACCOUNT
    if prefix == _CONTRACT_NAME_PREFIX:
        return _evm_to_contract_name(addr), AddressType.CONTRACT_NAME
    return _evm_to_xchain_ak(addr), AddressType.XCHAIN