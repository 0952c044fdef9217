"""A fixed-size table of shell variables."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

MAXVARS = 200


class TableFullError(Exception):
    """Raised when the variable table has no room left."""


@dataclass
class _Var:
    text: str
    exported: bool = False


class VariableTable:
    """Holds up to MAXVARS variables as 'name=value' strings."""

    def __init__(self) -> None:
        self._vars: list[_Var] = []

    def _find(self, name: str) -> _Var | None:
        prefix = f"{name}="
        return next((var for var in self._vars if var.text.startswith(prefix)), None)

    def store(self, name: str, value: str) -> None:
        """Set name to value, adding it if new."""
        item = self._find(name)
        if item is None:
            if len(self._vars) >= MAXVARS:
                raise TableFullError(f"no room for variable {name}")
            self._vars.append(_Var(f"{name}={value}"))
        else:
            item.text = f"{name}={value}"

    def lookup(self, name: str) -> str:
        """Value of name, or '' when it is not set."""
        item = self._find(name)
        return "" if item is None else item.text[len(name) + 1:]

    def export(self, name: str) -> None:
        """Mark name as global, creating it empty if it does not exist."""
        item = self._find(name)
        if item is None:
            self.store(name, "")
            item = self._find(name)
        item.exported = True

    def listing(self) -> list[str]:
        """One line per variable; exported ones start with '* '."""
        return [f"* {var.text}" if var.exported else var.text for var in self._vars]

    def load_environ(self, env: Mapping[str, str] | Iterable[str]) -> None:
        """Replace the table with env, every entry exported."""
        if isinstance(env, Mapping):
            entries = [f"{key}={value}" for key, value in env.items()]
        else:
            entries = list(env)
        if len(entries) > MAXVARS:
            raise TableFullError(f"environment has more than {MAXVARS} entries")
        self._vars = [_Var(text, True) for text in entries]

    def to_environ(self) -> dict[str, str]:
        """All variables as a name to value mapping."""
        result = {}
        for var in self._vars:
            name, _, value = var.text.partition("=")
            result[name] = value
        return result