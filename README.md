# matrixsdk

Client-side building blocks for XuperChain-style blockchains:

- **Accounts** (`matrixsdk.account`): load an account from plain key files
  and attach a contract account (`XC` followed by 16 digits, for example
  `XC1234567812345678@xuper`).
- **Address conversion** (`matrixsdk.address`): turn chain addresses,
  contract names and contract accounts into EVM addresses and back. Base58 and
  double SHA-256 helpers are included.
- **Configuration** (`matrixsdk.config`): SDK settings with built-in
  defaults. They can be loaded from a YAML file and are kept as a process-wide
  instance.
- **Remote signing service** (`matrixsdk.sgx_client`, `matrixsdk.sgx_account`):
  create, restore and use accounts whose keys are held by a key service that is
  reached over HTTP.
- **ACLs** (`matrixsdk.acl`), **block event filters** (`matrixsdk.event`) and
  **request options** (`matrixsdk.options`): the data that describes
  permissions, block event subscriptions and transaction requests.
- **Common helpers** (`matrixsdk.common`): nonces, amount validation,
  directory creation and the `SdkError` exception hierarchy.

## Installation

```
pip install matrixsdk
```

The only runtime dependency is PyYAML.

## Usage

### Address conversion

```python
from matrixsdk.address import AddressType, xchain_to_evm_address, evm_to_xchain_address

evm, kind = xchain_to_evm_address("XC1111111111111113@xuper")
# evm == "3131313231313131313131313131313131313133"
# kind is AddressType.CONTRACT_ACCOUNT

name, kind = evm_to_xchain_address("313131312D2D2D73746F72616765646174613131")
# name == "storagedata11", kind is AddressType.CONTRACT_NAME
```

EVM addresses come back as upper-case hex. Input that cannot be converted
raises `ValueError`.

### Accounts

```python
from matrixsdk.account import get_account_from_plain_file

acc = get_account_from_plain_file("keys")   # reads address, public.key and private.key
acc.set_contract_account("XC1234567812345678@xuper")
print(acc.contract_account)                 # "XC1234567812345678@xuper"
print(acc.auth_require)                     # "XC1234567812345678@xuper/<address>"
acc.remove_contract_account()
print(acc.has_contract_account)             # False
```

A missing key file raises `OSError`. A malformed contract account raises
`InvalidContractAccountError` from `matrixsdk.common`.

### Configuration

```python
from matrixsdk.config import default_config, get_config, get_instance, set_config

cfg = get_config("conf/sdk.yaml")   # defaults are kept for any key the file leaves out
cfg.set_gm_crypto()

set_config("host:8848", "endorse-addr", "fee-addr", "10", True, True, "100")
assert get_instance().compliance_check.compliance_check_endorse_service_fee == 10
```

The first call to `get_instance()` tries to load `../../conf/sdk.yaml`. If
that file cannot be read, it falls back to `default_config()`.

### Remote signing service

```python
from matrixsdk.sgx_account import create_account_sgx, retrieve_account_sgx
from matrixsdk.sgx_client import ApiClient

acc = create_account_sgx("http://127.0.0.1:8080")
same = retrieve_account_sgx("http://127.0.0.1:8080", acc.address)

reply = ApiClient("http://127.0.0.1:8080").ping()
print(reply.code, reply.msg, reply.data)
```

- Requests are sent as JSON, and byte values are sent base64-encoded.
- Each reply is decoded into a `Response` with `code`, `msg` and `data` (bytes).
- `create_account_sgx` raises `SdkError` when the service does not answer with
  code 200.
- `retrieve_account_sgx` raises `InvalidParamError` for an empty URL or
  address, and `SdkError` when the service does not hold the address.
- Transport failures raise `OSError`.

### ACLs

```python
from matrixsdk.acl import default_acl, new_acl

acl = new_acl(1, 0.6)
acl.add_ak("alice-address", 0.3)
acl.add_ak("bob-address", 0.3)

solo = default_acl("alice-address")   # rule 1, accept value 1.0, weight 1.0
```

### Event filters and request options

```python
from matrixsdk.event import init_event_opts, with_block_range, with_contract, with_skip_empty_tx
from matrixsdk.options import RequestOptions, apply_options, with_desc, with_fee

events = init_event_opts(with_contract("counter"), with_block_range("1", "10"), with_skip_empty_tx())
request = apply_options(RequestOptions(), with_fee("10"), with_desc("transfer"))
```

Unless options change them, events use the `xuper` chain and a buffer of 100
blocks. An option that rejects its value, such as `with_bcname("")`, raises
`ValueError`.

`FilteredBlock.from_message` builds a block from a message that has the
wire-format fields. A `Watcher` holds received blocks in its
`filtered_blocks` queue. Iterating over a `Watcher` yields those blocks until
it is closed.

### Common helpers

```python
from matrixsdk.common import get_nonce, is_valid_amount, set_seed

set_seed()
nonce = get_nonce()
is_valid_amount("")      # "0"
is_valid_amount("345")   # "345"
is_valid_amount("-345")  # None
```

## What the package does not do

- It has no node client. It does not connect to a chain, build, sign or post
  transactions, or run queries.
- Nothing in the package subscribes to a node for block events. A `Watcher`
  only holds blocks that are put into its queue.
- It does not generate key pairs or mnemonics, and it does not read or write
  password-encrypted key files. Accounts come from plain key files or from the
  remote signing service.

## Running the tests

```
pip install -e ".[test]"
pytest
```