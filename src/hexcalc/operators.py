'''
Operator table: reserved words and the stack transforms they name.

Binary operators pop the top (p1), then the second (p2), and push p2 op p1,
so ``7 2 -`` is 5. Every integer result is wrapped to a signed 64-bit word.
'''

from collections import namedtuple
import logging
import operator

from .formatter import render, unsigned
from .util import (MalformedLiteral, ReservedNameConflict, TypeMismatch,
                   WORD_BITS, wrap, wrap_user_errors)


logger = logging.getLogger(__name__)

Operator = namedtuple('Operator', ['description', 'function'])


def _integer(value):
    if isinstance(value, str):
        raise TypeMismatch('Expected an integer, got {}'.format(render(value)))
    return value


def _binary(f, description):
    @wrap_user_errors(description + ' failed: {error}')
    def apply(machine):
        p1 = _integer(machine.stack.pop())
        p2 = _integer(machine.stack.pop())
        machine.stack.push(wrap(f(p2, p1)))
    apply.__name__ = f.__name__
    return Operator(description, apply)


def _unary(f, description):
    @wrap_user_errors(description + ' failed: {error}')
    def apply(machine):
        machine.stack.push(wrap(f(_integer(machine.stack.pop()))))
    apply.__name__ = f.__name__
    return Operator(description, apply)


def _stack(description):
    '''
    Register a machine-level operator, run as is.
    '''
    def decorator(f):
        return Operator(description, wrap_user_errors(
            description + ' failed: {error}')(f))
    return decorator


def divide(left, right):
    if right == 0:
        raise MalformedLiteral('Division by zero')
    return left // right


def lshift(left, count):
    if count < 0:
        raise MalformedLiteral('Negative shift count {}'.format(count))
    if count >= WORD_BITS:
        return 0
    return left << count


def rshift(left, count):
    if count < 0:
        raise MalformedLiteral('Negative shift count {}'.format(count))
    return left >> min(count, WORD_BITS)


def power(base, exponent):
    if exponent < 0:
        raise MalformedLiteral('Negative exponent {}'.format(exponent))
    return pow(base, exponent, 1 << WORD_BITS)


@_stack('Swap the two topmost elements')
def swap(machine):
    p1 = machine.stack.pop()
    p2 = machine.stack.pop()
    machine.stack.push(p1)
    machine.stack.push(p2)


@_stack("Assign value to variable: value 'name' =")
def assign(machine):
    name = machine.stack.pop()
    if not isinstance(name, str) or not machine.lexer.isidentifier(name):
        raise TypeMismatch('Not a variable name: {}'.format(render(name)))
    if name in OPERATORS:
        raise ReservedNameConflict(
            'Reserved word cannot be used as variable name: {}'.format(name))
    value = machine.stack.pop()
    machine.variables.assign(name, value)
    logger.debug('%s = %r', name, value)


@_stack('Begin function definition: [ ... ]')
def begin(machine):
    machine.function.begin()


@_stack('Rotate stack, moving top to bottom')
def rotate_down(machine):
    machine.stack.rotate_down()


@_stack('Rotate stack, moving bottom to top')
def rotate_up(machine):
    machine.stack.rotate_up()


@_stack('Discard top of stack')
def drop(machine):
    machine.stack.pop()


@_stack('Duplicate top of stack')
def dup(machine):
    machine.stack.push(machine.stack.top())


@_stack('Convert integer to string, one character per byte')
def to_s(machine):
    digits = format(unsigned(_integer(machine.stack.pop())), 'x')
    if len(digits) % 2:
        digits = '0' + digits
    machine.stack.push(''.join(chr(byte)
                               if 32 <= byte <= 127
                               else '\\x{:02X}'.format(byte)
                               for byte
                               in bytes.fromhex(digits)))


@_stack('Convert string to integer, one byte per character')
def to_i(machine):
    value = machine.stack.pop()
    if isinstance(value, str):
        value = wrap(int.from_bytes(value.encode(), 'big'))
    machine.stack.push(value)


@_stack('Show stack')
def show(machine):
    machine.printstack()


@_stack('Show variables')
def show_vars(machine):
    machine.printvars()


@_stack("Delete variable: 'name' del")
def delete(machine):
    name = machine.stack.pop()
    machine.variables.delete(name)
    logger.debug('Deleted %r', name)


@_stack('Clear stack')
def clear(machine):
    machine.stack.clear()


@_stack('Show this help')
def show_help(machine):
    machine.printhelp()


_complement = _unary(operator.__invert__, 'Bitwise complement')
_negate = _unary(operator.__neg__, 'Negate')

# Reserved words. Aliases share their Operator.
OPERATORS = {
    # Arithmetic
    '+': _binary(operator.__add__, 'Add'),
    '-': _binary(operator.__sub__, 'Subtract'),
    '*': _binary(operator.__mul__, 'Multiply'),
    '/': _binary(divide, 'Divide, rounding down'),
    '**': _binary(power, 'Raise to power'),
    'neg': _negate,
    'chs': _negate,

    # Bitwise
    '^': _binary(operator.__xor__, 'Bitwise exclusive or'),
    '&': _binary(operator.__and__, 'Bitwise and'),
    '|': _binary(operator.__or__, 'Bitwise or'),
    '<<': _binary(lshift, 'Shift left'),
    '>>': _binary(rshift, 'Shift right, keeping sign'),
    '!': _complement,
    'not': _complement,

    # Conversion
    'to_s': to_s,
    'to_i': to_i,

    # Stack
    'swap': swap,
    'rot': rotate_down,
    'rotu': rotate_up,
    'pop': drop,
    'dup': dup,
    'clear': clear,

    # Variables and functions
    '=': assign,
    'del': delete,
    '[': begin,

    # Display
    'show': show,
    's': show,
    'vars': show_vars,
    'help': show_help,
}
