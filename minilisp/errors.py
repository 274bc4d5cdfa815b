
class LispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class LispSyntaxError(LispError):
    """ Raised when the token stream is empty or its parentheses do not balance"""

class LispTypeError(LispError):
    """ Raised when a value is not of the variant a primitive expects"""

class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class LispNotApplicableError(LispError):
    """ Raised when the head of an application is neither a lambda nor an intrinsic"""

class LispZeroDivisionError(LispError, ZeroDivisionError):
    """ Raised when an integer is divided by zero"""
