"""Scoped symbol table mapping names to types."""

from __future__ import annotations

from typing import Dict, Optional

from medi.types import MediType


class TypeEnv:
    """A scope of name-to-type bindings with an optional enclosing scope."""

    def __init__(self, parent: Optional["TypeEnv"] = None) -> None:
        self.parent = parent
        self._symbols: Dict[str, MediType] = {}

    def insert(self, name: str, typ: MediType) -> None:
        """Bind ``name`` to ``typ`` in this scope."""
        self._symbols[name] = typ

    def get(self, name: str) -> Optional[MediType]:
        """Look ``name`` up here, then in enclosing scopes; None if unbound."""
        scope: Optional[TypeEnv] = self
        while scope is not None:
            if name in scope._symbols:
                return scope._symbols[name]
            scope = scope.parent
        return None

    def child(self) -> "TypeEnv":
        """Return a new scope nested inside this one."""
        return TypeEnv(self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None