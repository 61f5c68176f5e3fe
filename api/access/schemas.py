"""
Access policy data model.

A policy is one mapping from subject selector to permission set. Selectors are
the wildcard `EVERYONE` ("*") or `role_selector(name)` ("role:<name>").
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Operation = Literal["read", "write"]

EVERYONE = "*"
ROLE_PREFIX = "role:"


def role_selector(role: str) -> str:
    return f"{ROLE_PREFIX}{role}"


class Permission(BaseModel):
    model_config = ConfigDict(frozen=True)

    read: bool = False
    write: bool = False

    def allows(self, operation: Operation) -> bool:
        return bool(getattr(self, operation))


NO_PERMISSION = Permission()


class AccessPolicy(BaseModel):
    model_config = ConfigDict(frozen=True)

    entries: dict[str, Permission] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_selectors(self) -> AccessPolicy:
        if EVERYONE not in self.entries:
            raise ValueError("Access policy needs an entry for the wildcard selector '*'.")
        for selector in self.entries:
            if selector != EVERYONE and not (
                selector.startswith(ROLE_PREFIX) and len(selector) > len(ROLE_PREFIX)
            ):
                raise ValueError(f"Unknown subject selector: {selector!r}.")
        return self

    @classmethod
    def build(cls, everyone: Permission, roles: dict[str, Permission] | None = None) -> AccessPolicy:
        entries = {EVERYONE: everyone}
        for role, permission in (roles or {}).items():
            entries[role_selector(role)] = permission
        return cls(entries=entries)

    def entry(self, selector: str) -> Permission:
        """Missing selectors grant nothing."""
        return self.entries.get(selector, NO_PERMISSION)

    @property
    def everyone(self) -> Permission:
        return self.entries[EVERYONE]

    def for_role(self, role: str) -> Permission:
        return self.entry(role_selector(role))
