"""Options for clients, transaction requests and queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TypeVar

T = TypeVar("T")


@dataclass
class GrpcTLSConfig:
    """Certificates for a TLS connection to a node."""

    server_name: str = ""
    cacert_file: str = ""
    cert_file: str = ""
    key_file: str = ""


@dataclass
class ClientOptions:
    """Settings of a node client."""

    config_file: str = ""
    use_grpc_gzip: bool = False
    grpc_tls: GrpcTLSConfig | None = None


@dataclass
class RequestOptions:
    """Settings of a single transaction request."""

    only_fee_from_account: bool = False
    fee: str = ""
    bcname: str = ""
    contract_invoke_amount: str = ""
    desc: str = ""
    other_auth_require: list[str] = field(default_factory=list)
    not_post: bool = False


@dataclass
class QueryOptions:
    """Settings of a query."""

    bcname: str = ""


def apply_options(target: T, *args: Callable[[T], None]) -> T:
    """Apply each option in ``args`` to ``target`` in turn and return it."""
    for apply in args:
        try:
            apply(target)
        except ValueError as exc:
            raise ValueError(f"option failed: {exc}") from exc
    return target


def with_query_bcname(bcname: str) -> Callable[[QueryOptions], None]:
    """Query the chain ``bcname``."""

    def apply(opt: QueryOptions) -> None:
        opt.bcname = bcname

    return apply


def with_config_file(config_file: str) -> Callable[[ClientOptions], None]:
    """Load the client configuration from ``config_file``."""

    def apply(opt: ClientOptions) -> None:
        opt.config_file = config_file

    return apply


def with_grpc_gzip() -> Callable[[ClientOptions], None]:
    """Compress calls to the node with gzip."""

    def apply(opt: ClientOptions) -> None:
        opt.use_grpc_gzip = True

    return apply


def with_grpc_tls(
    server_name: str, cacert_file: str, cert_file: str, key_file: str
) -> Callable[[ClientOptions], None]:
    """Connect to the node over TLS with the given certificates."""

    def apply(opt: ClientOptions) -> None:
        if opt.grpc_tls is None:
            opt.grpc_tls = GrpcTLSConfig()
        opt.grpc_tls.server_name = server_name
        opt.grpc_tls.cacert_file = cacert_file
        opt.grpc_tls.cert_file = cert_file
        opt.grpc_tls.key_file = key_file

    return apply


def with_fee_from_account() -> Callable[[RequestOptions], None]:
    """Pay fee and gas from the contract account only."""

    def apply(opt: RequestOptions) -> None:
        opt.only_fee_from_account = True

    return apply


def with_fee(fee: str) -> Callable[[RequestOptions], None]:
    """Set the transaction fee."""

    def apply(opt: RequestOptions) -> None:
        opt.fee = fee

    return apply


def with_bcname(name: str) -> Callable[[RequestOptions], None]:
    """Send the transaction to the chain ``name``; it must not be empty."""

    def apply(opt: RequestOptions) -> None:
        if name == "":
            raise ValueError("invalid bcname")
        opt.bcname = name

    return apply


def with_contract_invoke_amount(amount: str) -> Callable[[RequestOptions], None]:
    """Transfer ``amount`` to the contract that is invoked."""

    def apply(opt: RequestOptions) -> None:
        opt.contract_invoke_amount = amount

    return apply


def with_desc(desc: str) -> Callable[[RequestOptions], None]:
    """Set the transaction description."""

    def apply(opt: RequestOptions) -> None:
        opt.desc = desc

    return apply


def with_not_post() -> Callable[[RequestOptions], None]:
    """Build the transaction only, without posting it."""

    def apply(opt: RequestOptions) -> None:
        opt.not_post = True

    return apply


def with_other_auth_requires(auth_requires: list[str]) -> Callable[[RequestOptions], None]:
    """Add signers other than the initiator, for multi-signature transactions."""

    def apply(opt: RequestOptions) -> None:
        opt.other_auth_require = list(auth_requires)

    return apply