'''
Hex RPN calculator.

Integer arithmetic, bitwise and shift operators, variables and simple
functions, with every value shown at once in hex, binary, signed and unsigned
decimal, and octal. Not intended to be Turing-complete!

Simple, simple, simple: a token is a number, an operator, a variable, or a
'name to assign to. Functions are just strings of tokens, run when their
variable is referenced:

    > [ 1 + ] 'inc' =
    > 0x41 inc to_s
    top[sz: 1] = 'B'
'''

import logging

__version__ = '1.2'

from .cli import CLI
from .lexer import Lexer
from .machine import Machine


logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = 'Machine', 'Lexer', 'CLI'
