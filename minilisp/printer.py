"""Textual rendering of Lisp values."""

from __future__ import annotations

from io import StringIO

from minilisp import LispValue
from minilisp.errors import LispTypeError
from minilisp.types.lambda_fn import Lambda
from minilisp.types.nil import NilType
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol

LAMBDA_PLACEHOLDER = "<lambda>"
INTRINSIC_PLACEHOLDER = "<intrinsic>"


def render(value: LispValue) -> str:
    """Render `value`; lists print each element followed by a space, e.g. `(1 2 )`."""
    match value:
        case NilType():
            return "()"
        case bool():
            raise LispTypeError(f"Cannot render {value!r}")
        case int():
            return str(value)
        case Symbol():
            return value.name
        case list():
            with StringIO() as buffer:
                buffer.write("(")
                for item in value:
                    buffer.write(render(item))
                    buffer.write(" ")
                buffer.write(")")
                return buffer.getvalue()
        case Lambda():
            return LAMBDA_PLACEHOLDER
        case Primitive():
            return INTRINSIC_PLACEHOLDER
        case _:
            raise LispTypeError(f"Cannot render {value!r}")
