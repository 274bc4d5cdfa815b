from __future__ import annotations

from minilisp import LispValue, SExpression, PrimitiveFn


class Primitive:
    """A named built-in operation.

    The operation receives the whole unevaluated form (operator at index 0)
    and the calling environment, and decides itself which arguments to
    evaluate. Strict operations and special forms share this one mechanism.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, raw: list[SExpression], env) -> LispValue:
        return self.fn(raw, env)

    def __repr__(self):
        return f"<Primitive {self.name}>"
