"""Truthiness and the two boolean encodings used by the primitives.

Nil is the only false value. Predicates and equality answer in the normal
encoding (1 for true, Nil for false); `and`, `or` and the numeric comparisons
answer in the inverted encoding (Nil for true, 1 for false).
"""

from minilisp import LispValue
from minilisp.types.nil import Nil

TRUE = 1


def is_truthy(val: LispValue) -> bool:
    return val is not Nil


def normal(flag: bool) -> LispValue:
    return TRUE if flag else Nil


def inverted(flag: bool) -> LispValue:
    return Nil if flag else TRUE
