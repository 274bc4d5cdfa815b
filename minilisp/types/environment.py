"""Runtime environment for minilisp.

An Environment maps symbol names to values and links to an optional `outer`
frame. Lookups walk outward; writes only ever touch the current frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, Sequence

from minilisp import LispValue
from minilisp.errors import LispArityError, LispTypeError
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol


def _key(name: str | Symbol) -> str:
    if isinstance(name, Symbol):
        return name.name
    if isinstance(name, str):
        return name
    raise LispTypeError(f"Cannot bind {name!r}: expected a symbol")


class Environment:
    """Chained mapping from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str | Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[_key(name)] = value

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str | Symbol) -> LispValue:
        """Return the innermost binding of `name`, or Nil if there is none."""
        env = self.find(name)
        if env is None:
            return Nil
        return env.vars[_key(name)]

    def child_from(
        self, names: Sequence[str | Symbol], values: Sequence[LispValue]
    ) -> Environment:
        """Create a child frame binding `names` to `values` positionally."""
        if len(names) != len(values):
            raise LispArityError(
                f"Expected {len(names)} argument(s), got {len(values)}"
            )
        child = Environment(self)
        for name, value in zip(names, values):
            child.define(name, value)
        return child

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: str | Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
