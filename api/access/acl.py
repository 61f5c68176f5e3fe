"""
Stateless permission checks over an item's access policy and a caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from .schemas import AccessPolicy, Operation


class Caller(Protocol):
    roles: frozenset[str]


class Guarded(Protocol):
    access_policy: AccessPolicy | None


class ACLEngine:
    def has_permission(self, item: Guarded, caller: Caller | None, operation: Operation) -> bool:
        """
        No policy allows everything. Otherwise the wildcard entry or any one
        of the caller's roles has to grant `operation`; grants only add up.
        """
        policy = item.access_policy
        if policy is None:
            return True
        if policy.everyone.allows(operation):
            return True

        roles = caller.roles if caller is not None else ()
        return any(policy.for_role(role).allows(operation) for role in roles)

    def has_role(self, caller: Caller | None, required_roles: Iterable[str]) -> bool:
        if caller is None:
            return False
        return any(role in caller.roles for role in required_roles)
