"""Access-control lists for contract accounts and contract methods."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PermissionModel:
    """The rule of an ACL and the weight it needs to accept."""

    rule: int = 0
    accept_value: float = 0.0


@dataclass
class ACL:
    """A permission model together with the weight of each address."""

    pm: PermissionModel = field(default_factory=PermissionModel)
    aks_weight: dict[str, float] = field(default_factory=dict)

    def add_ak(self, ak: str, weight: float) -> None:
        """Give address ``ak`` the signing weight ``weight``."""
        self.aks_weight[ak] = weight


def new_acl(rule: int, accept_value: float) -> ACL:
    """Return an ACL with the given rule and threshold and no addresses."""
    return ACL(pm=PermissionModel(rule=rule, accept_value=accept_value))


def default_acl(address: str) -> ACL:
    """Return the ACL that lets ``address`` act alone."""
    return ACL(pm=PermissionModel(rule=1, accept_value=1.0), aks_weight={address: 1.0})