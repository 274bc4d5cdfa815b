from __future__ import annotations
import sys


class Symbol:
    """Case-sensitive identifier; the name is interned for cheap comparison."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __setattr__(self, key, value):
        if hasattr(self, "name"):
            raise AttributeError("Symbol is immutable")
        super().__setattr__(key, value)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
