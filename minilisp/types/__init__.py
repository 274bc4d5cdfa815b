from minilisp.types.nil import Nil, NilType
from minilisp.types.symbol import Symbol
from minilisp.types.lambda_fn import Lambda
from minilisp.types.primitive import Primitive
from minilisp.types.environment import Environment

__all__ = ("Nil", "NilType", "Symbol", "Lambda", "Primitive", "Environment")
