"""User-defined closure representation."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression


class Lambda:
    """A parameter-name list plus one body form.

    No environment is captured: the body runs in a child of whatever
    environment the call happens in, so free names resolve dynamically.
    """

    __slots__ = ("formals", "body")

    def __init__(self, formals: list[str], body: SExpression):
        self.formals: list[str] = list(formals)
        self.body: SExpression = body

    def __str__(self) -> str:
        from minilisp.printer import render

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.formals))
            buffer.write(") ")
            buffer.write(render(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda {self}>"
