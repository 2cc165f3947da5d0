import pytest

from matrixsdk.account import Account, get_account_from_plain_file
from matrixsdk.common import InvalidContractAccountError

ADDRESS = "TestAddressAbcdefGhijk"
PUBLIC_KEY = "placeholder"
PRIVATE_KEY = "secret"


@pytest.mark.parametrize("bad", ["123", "XC123@xuper", "1234567812345678@xuper", ""])
def test_set_contract_account_rejects(bad):
    acc = Account(address=ADDRESS)
    with pytest.raises(InvalidContractAccountError):
        acc.set_contract_account(bad)
    assert acc.has_contract_account is False


def test_contract_account_lifecycle():
    acc = Account(address=ADDRESS)
    assert acc.auth_require == ADDRESS
    acc.set_contract_account("XC1234567812345678@xuper")
    assert acc.contract_account == "XC1234567812345678@xuper"
    assert acc.has_contract_account is True
    assert acc.auth_require == "XC1234567812345678@xuper/" + ADDRESS
    acc.remove_contract_account()
    assert acc.has_contract_account is False
    assert acc.contract_account == ""
    assert acc.auth_require == ADDRESS


def test_contract_account_without_suffix_is_accepted():
    acc = Account(address=ADDRESS)
    acc.set_contract_account("XC1234567887654321")
    assert acc.auth_require == "XC1234567887654321/" + ADDRESS


def _write(directory, has_address, has_pubkey, has_privkey):
    directory.mkdir(parents=True, exist_ok=True)
    if has_address:
        (directory / "address").write_text(ADDRESS, encoding="utf-8")
    if has_pubkey:
        (directory / "public.key").write_text(PUBLIC_KEY, encoding="utf-8")
    if has_privkey:
        (directory / "private.key").write_text(PRIVATE_KEY, encoding="utf-8")


def test_get_account_from_plain_file(tmp_path):
    keys = tmp_path / "keys"
    _write(keys, True, True, True)
    acc = get_account_from_plain_file(keys)
    assert acc.address == ADDRESS
    assert acc.public_key == PUBLIC_KEY
    assert acc.private_key == PRIVATE_KEY
    assert acc.mnemonic == ""


@pytest.mark.parametrize(
    "has_address, has_pubkey, has_privkey",
    [(True, True, False), (False, True, True), (True, False, True)],
)
def test_get_account_from_plain_file_missing(tmp_path, has_address, has_pubkey, has_privkey):
    keys = tmp_path / "aaa"
    _write(keys, has_address, has_pubkey, has_privkey)
    with pytest.raises(FileNotFoundError):
        get_account_from_plain_file(keys)


def test_repr_hides_private_key():
    acc = Account(address=ADDRESS, private_key=PRIVATE_KEY)
    assert PRIVATE_KEY not in repr(acc)
    assert ADDRESS in repr(acc)