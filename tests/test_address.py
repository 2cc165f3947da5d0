import pytest

from matrixsdk.address import (
    AddressType,
    base58_decode,
    base58_encode,
    double_sha256,
    evm_to_xchain_address,
    using_sha256,
    xchain_to_evm_address,
)

CASES = [
    (
        "XC1111111111111113@xuper",
        "contract-account",
        "3131313231313131313131313131313131313133",
    ),
    (
        "dpzuVdosQrF2kmzumhVeFQZa1aYcdgFpN",
        "xchain",
        "93F86A462A3174C7AD1281BCF400A9F18D244E06",
    ),
    (
        "storagedata11",
        "contract-name",
        "313131312D2D2D73746F72616765646174613131",
    ),
]


@pytest.mark.parametrize("xchain, kind, evm", CASES)
def test_xchain_to_evm(xchain, kind, evm):
    addr, addr_type = xchain_to_evm_address(xchain)
    assert addr == evm
    assert addr_type == kind


@pytest.mark.parametrize("xchain, kind, evm", CASES)
def test_evm_to_xchain(xchain, kind, evm):
    addr, addr_type = evm_to_xchain_address(evm)
    assert addr == xchain
    assert addr_type == kind


def test_lowercase_evm_input():
    addr, addr_type = evm_to_xchain_address("93f86a462a3174c7ad1281bcf400a9f18d244e06")
    assert addr == "dpzuVdosQrF2kmzumhVeFQZa1aYcdgFpN"
    assert addr_type is AddressType.XCHAIN


def test_contract_name_round_trip():
    evm, kind = xchain_to_evm_address("abcdefghijklmno")
    assert kind is AddressType.CONTRACT_NAME
    assert evm_to_xchain_address(evm) == ("abcdefghijklmno", AddressType.CONTRACT_NAME)


@pytest.mark.parametrize("bad", ["abc", "0OIl0OIl", ""])
def test_bad_xchain_address(bad):
    with pytest.raises(ValueError, match="bad address"):
        xchain_to_evm_address(bad)


@pytest.mark.parametrize("bad", ["zz", "1234", "31" * 21])
def test_bad_evm_address(bad):
    with pytest.raises(ValueError):
        evm_to_xchain_address(bad)


def test_base58_known_values():
    assert base58_encode(b"hello world") == "StV1DL6CwTryKyV"
    assert base58_encode(b"\x00\x00\x01") == "112"
    assert base58_decode("112") == b"\x00\x00\x01"


def test_base58_round_trip():
    data = bytes(range(0, 40))
    assert base58_decode(base58_encode(data)) == data


def test_base58_rejects_bad_char():
    with pytest.raises(ValueError):
        base58_decode("0abc")


def test_sha256_values():
    assert using_sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    assert double_sha256(b"").hex() == (
        "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"
    )