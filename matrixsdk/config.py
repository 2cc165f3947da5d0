"""SDK configuration: defaults, YAML loading and a process-wide instance."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CRYPTO_XCHAIN = "xchain"
CRYPTO_GM = "gm"

DEFAULT_CONF_FILE = os.path.join("..", "..", "conf", "sdk.yaml")

_ATOI = re.compile(r"[+-]?[0-9]+")


@dataclass
class ComplianceCheckConfig:
    """Endorser settings."""

    is_need_compliance_check: bool = False
    is_need_compliance_check_fee: bool = False
    compliance_check_endorse_service_fee: int = 0
    compliance_check_endorse_service_fee_addr: str = ""
    compliance_check_endorse_service_addr: str = ""

    _YAML_KEYS = {
        "isNeedComplianceCheck": ("is_need_compliance_check", bool),
        "isNeedComplianceCheckFee": ("is_need_compliance_check_fee", bool),
        "complianceCheckEndorseServiceFee": ("compliance_check_endorse_service_fee", int),
        "complianceCheckEndorseServiceFeeAddr": (
            "compliance_check_endorse_service_fee_addr",
            str,
        ),
        "complianceCheckEndorseServiceAddr": ("compliance_check_endorse_service_addr", str),
    }

    def _update(self, data: Any) -> None:
        _apply_mapping(self, data, self._YAML_KEYS)


@dataclass
class CommConfig:
    """SDK configuration."""

    endorse_service_host: str = ""
    compliance_check: ComplianceCheckConfig = field(default_factory=ComplianceCheckConfig)
    min_new_chain_amount: str = ""
    crypto: str = ""
    tx_version: int = 0

    _YAML_KEYS = {
        "endorseServiceHost": ("endorse_service_host", str),
        "minNewChainAmount": ("min_new_chain_amount", str),
        "crypto": ("crypto", str),
        "txVersion": ("tx_version", int),
    }

    def set_gm_crypto(self) -> None:
        """Use the national-standard (GM) cryptography."""
        self.crypto = CRYPTO_GM

    def set_xchain_crypto(self) -> None:
        """Use the xchain cryptography."""
        self.crypto = CRYPTO_XCHAIN

    def _update(self, data: Any) -> None:
        if data is None:
            return
        if not isinstance(data, dict):
            raise ValueError("config document must be a mapping")
        _apply_mapping(self, data, self._YAML_KEYS)
        if "complianceCheck" in data:
            nested = data["complianceCheck"]
            if nested is None:
                self.compliance_check = ComplianceCheckConfig()
            else:
                self.compliance_check._update(nested)


def _coerce(key: str, value: Any, kind: type) -> Any:
    if value is None:
        return kind()
    if kind is bool and isinstance(value, bool):
        return value
    if kind is int and isinstance(value, int) and not isinstance(value, bool):
        return value
    if kind is str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
    raise ValueError(f"cannot use {value!r} as {kind.__name__} for {key!r}")


def _apply_mapping(target: Any, data: Any, keys: dict[str, tuple[str, type]]) -> None:
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {data!r}")
    for key, (attr, kind) in keys.items():
        if key in data:
            setattr(target, attr, _coerce(key, data[key], kind))


_config: CommConfig | None = None


def default_config() -> CommConfig:
    """Return a fresh configuration holding the built-in defaults."""
    return CommConfig(
        endorse_service_host="10.144.94.18:8848",
        compliance_check=ComplianceCheckConfig(
            compliance_check_endorse_service_fee=10,
            compliance_check_endorse_service_fee_addr="XBbhR82cB6PvaLJs3D4uB9f12bhmKkHeX",
            compliance_check_endorse_service_addr="TYyA3y8wdFZyzExtcbRNVd7ZZ2XXcfjdw",
        ),
        min_new_chain_amount="100",
        crypto=CRYPTO_XCHAIN,
    )


def get_config(conf_file: str | os.PathLike[str]) -> CommConfig:
    """Load ``conf_file`` over the defaults and make it the current instance.

    Raises ``OSError`` if the file cannot be read and ``ValueError`` if its
    contents are not a valid configuration.
    """
    global _config
    cfg = default_config()
    with open(conf_file, encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid config file {conf_file}: {exc}") from exc
    cfg._update(data)
    _config = cfg
    return cfg


def get_instance() -> CommConfig:
    """Return the current configuration, loading it on first use."""
    global _config
    if _config is None:
        try:
            get_config(DEFAULT_CONF_FILE)
        except OSError as exc:
            _config = default_config()
            logger.info(
                "no config file in ./conf/sdk.yaml, use default config: %s (%s)",
                _config,
                exc,
            )
    assert _config is not None
    return _config


def _atoi(text: str) -> int:
    return int(text) if _ATOI.fullmatch(text) else 0


def set_config(
    check_host: str,
    check_addr: str,
    check_fee_addr: str,
    check_fee: str,
    is_need_check: bool,
    is_need_check_fee: bool,
    min_new_chain_amount: str,
) -> CommConfig:
    """Build a configuration from the given values and make it current.

    Empty strings keep the defaults; a fee that is not an integer becomes 0.
    """
    global _config
    cfg = default_config()
    if check_host:
        cfg.endorse_service_host = check_host
    if check_fee_addr:
        cfg.compliance_check.compliance_check_endorse_service_fee_addr = check_fee_addr
    if check_addr:
        cfg.compliance_check.compliance_check_endorse_service_addr = check_addr
    if check_fee:
        cfg.compliance_check.compliance_check_endorse_service_fee = _atoi(check_fee)
    if min_new_chain_amount:
        cfg.min_new_chain_amount = min_new_chain_amount
    cfg.compliance_check.is_need_compliance_check = is_need_check
    cfg.compliance_check.is_need_compliance_check_fee = is_need_check_fee
    _config = cfg
    return cfg