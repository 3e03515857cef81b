from functools import wraps


class RPNError(Exception):
    '''
    Base of every user-facing calculator error.

    ``token`` is the input token being evaluated when the error was raised,
    filled in by the machine if the raiser didn't know it.
    '''
    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token

    @property
    def message(self):
        return self.args[0]


class StackEmpty(RPNError):
    pass


class IndexOutOfRange(RPNError):
    pass


class UnknownVariable(RPNError):
    pass


class ReservedNameConflict(RPNError):
    pass


class RecursiveFunctionDefinition(RPNError):
    pass


class NestingTooDeep(RPNError):
    pass


class MalformedLiteral(RPNError):
    '''
    Bad literal, or operand out of range for an operator (shift count,
    exponent, divisor).
    '''


class TypeMismatch(RPNError):
    pass


class UnmatchedToken(RPNError):
    '''
    Advisory only. Never aborts a line.
    '''


WORD_BITS = 64


def wrap(n, bits=WORD_BITS):
    '''
    Wrap integer n into a signed two's complement integer of bits width.
    '''
    half = 1 << (bits - 1)
    return (n + half) % (1 << bits) - half


def wrap_user_errors(fmt):
    '''
    Decorator converting stray exceptions into RPNErrors.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, error=e, **kwargs)) from e
        return wrapper
    return decorator
