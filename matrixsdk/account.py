"""Accounts and the contract-account behaviour they share."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from matrixsdk.common import InvalidContractAccountError

logger = logging.getLogger(__name__)

_CONTRACT_ACCOUNT_RE = re.compile(r"XC[0-9]{16}")


class ContractAccountHolder:
    """Mixin for an account that may act on behalf of a contract account."""

    address: str
    _contract_account: str = ""

    def set_contract_account(self, contract_account: str) -> None:
        """Act as ``contract_account`` from now on; it must look like XC + 16 digits."""
        if not _CONTRACT_ACCOUNT_RE.match(contract_account):
            raise InvalidContractAccountError()
        self._contract_account = contract_account

    def remove_contract_account(self) -> None:
        self._contract_account = ""

    @property
    def contract_account(self) -> str:
        """The contract account in use, or an empty string."""
        return self._contract_account

    @property
    def has_contract_account(self) -> bool:
        return self._contract_account != ""

    @property
    def auth_require(self) -> str:
        """The auth-require entry for transactions signed by this account."""
        if self.has_contract_account:
            return f"{self._contract_account}/{self.address}"
        return self.address


@dataclass
class Account(ContractAccountHolder):
    """A key pair with its address and, if known, its mnemonic."""

    address: str
    public_key: str = ""
    private_key: str = field(default="", repr=False)
    mnemonic: str = field(default="", repr=False)
    _contract_account: str = field(default="", init=False, repr=False)


def get_account_from_plain_file(path: str | Path) -> Account:
    """Load an account from the ``address``, ``public.key`` and ``private.key`` files in ``path``."""
    directory = Path(path)
    parts = {}
    for name, label in (("address", "address"), ("public.key", "pubkey"), ("private.key", "prikey")):
        try:
            parts[name] = (directory / name).read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("GetAccountFromPlainFile error load %s error = %s", label, exc)
            raise
    return Account(
        address=parts["address"],
        public_key=parts["public.key"],
        private_key=parts["private.key"],
    )