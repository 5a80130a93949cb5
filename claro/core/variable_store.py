"""Variable store for one interpreter instance.

Names are global to the instance and shared by every batch it runs
(each file, each interactive line). Access is single-threaded.
"""
from __future__ import annotations

from typing import Optional


class VariableStore:
    """Maps 'varname' → str value."""

    def __init__(self) -> None:
        self._vars: dict[str, str] = {}

    # ------------------------------------------------------------------
    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._vars.get(name, default)

    def set(self, name: str, value: str) -> None:
        self._vars[name] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"VariableStore({self._vars!r})"
