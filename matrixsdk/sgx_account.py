"""Accounts whose keys live inside the enclave key service."""

from __future__ import annotations

from dataclasses import dataclass, field

from matrixsdk.account import ContractAccountHolder
from matrixsdk.common import InvalidParamError, SdkError
from matrixsdk.sgx_client import CREATE_METHOD, IS_EXIST_METHOD, ApiClient

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}


@dataclass
class AccountSgx(ContractAccountHolder):
    """An address whose private key is held by the key service behind ``api``."""

    address: str
    api: ApiClient | None = field(default=None, repr=False)
    _contract_account: str = field(default="", init=False, repr=False)


def create_account_sgx(url: str) -> AccountSgx:
    """Ask the key service at ``url`` for a new key and return its account."""
    api = ApiClient(url)
    result = api.create(CREATE_METHOD, None)
    if result.code != 200:
        raise SdkError("create error")
    return AccountSgx(address=result.data.decode("utf-8"), api=api)


def retrieve_account_sgx(url: str, addr: str) -> AccountSgx:
    """Return the account for ``addr`` if the key service at ``url`` holds its key."""
    if not url or not addr:
        raise InvalidParamError("nil url or addr")
    api = ApiClient(url)
    result = api.is_exist(IS_EXIST_METHOD, {"address": addr})
    if result.data.decode("utf-8", errors="replace") in _TRUE:
        return AccountSgx(address=addr, api=api)
    raise SdkError("RetrieveAccountSgx error")