
class LispyError(Exception):
    """ Base class for all host-level Lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised when source text cannot be read into a syntax tree"""

class LispyLoadError(LispyError):
    """ Raised when a prelude form evaluates to an error"""

# Errors raised by programs are not exceptions: they are `lispy.types.Error`
# values returned from evaluation.
