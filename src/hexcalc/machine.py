import logging

from .formatter import render
from .lexer import Lexer
from .operators import OPERATORS
from .stack import Stack
from .util import (IndexOutOfRange, MalformedLiteral, NestingTooDeep,
                   RecursiveFunctionDefinition, ReservedNameConflict,
                   RPNError, UnmatchedToken, wrap, wrap_user_errors)
from .variables import Variables


logger = logging.getLogger(__name__)


class FunctionDefinition:
    '''
    Function body capture: [ ... ]

    Idle while tokens is None, capturing otherwise.
    '''

    def __init__(self):
        self.tokens = None

    @property
    def capturing(self):
        return self.tokens is not None

    def begin(self):
        if self.capturing:
            self.tokens = None
            raise RecursiveFunctionDefinition(
                'Cannot handle recursive function definition')
        logger.debug('Begin function definition')
        self.tokens = []

    def feed(self, token):
        '''
        Capture token if capturing.

        Return the finished body when token closes the definition, None
        otherwise.
        '''
        if token == '[':
            self.tokens = None
            raise RecursiveFunctionDefinition(
                'Cannot handle recursive function definition')
        elif token == ']':
            body = ' '.join(self.tokens)
            self.tokens = None
            logger.debug('End function definition: %r', body)
            return body
        self.tokens.append(token)
        return None


class Machine:
    '''
    Integer stack machine (hex RPN calculator).

    Takes lines of tokens and runs them. Owns the stack, variables, and
    function definition state for its whole life.
    '''

    # How deeply token evaluation may nest through function calls
    MAX_NESTING = 40

    SUFFIXES = {
        'K': 1024,
        'M': 1024 * 1024,
        'G': 1024 * 1024 * 1024,
    }

    BASES = {
        'bin': 2,
        'oct': 8,
        'dec': 10,
        'hex': 16,
    }

    def __init__(self, out=None, verbose=None):
        '''
        Create empty stack machine.

        :param out: Stream to print results and errors on. stdout by default.
        :param verbose: Log tracebacks of reported errors.
        '''
        self.stack = Stack()
        self.variables = Variables()
        self.function = FunctionDefinition()
        self.lexer = Lexer()
        self.out = out
        self.verbose = verbose
        self.nesting = 0

    def print(self, *args, **kwargs):
        print(*args, file=self.out, **kwargs)

    def evaluate_line(self, line):
        '''
        Evaluate all tokens on line.

        Reports, rather than raises, user errors. The first error abandons
        the rest of the line; effects of earlier tokens stay.
        '''
        try:
            self._evaluate(line)
        except RPNError as e:
            self.print('Error: {}: {}'.format(e.token, e.message))
            if self.verbose:
                logger.exception('While evaluating %r', line)

    def load(self, lines):
        '''
        Evaluate lines, e.g. of a startup script. An error only ends its own
        line.
        '''
        for line in lines:
            self.evaluate_line(line)

    def _evaluate(self, line):
        for token in self.lexer.lex(line):
            try:
                self.evaluate_token(token)
            except UnmatchedToken as e:
                self.print(e.message)

    def evaluate_token(self, token):
        '''
        Evaluate a single token, tracking how deeply evaluation is nested.
        '''
        self.nesting += 1
        try:
            if self.nesting > type(self).MAX_NESTING:
                raise NestingTooDeep('Parsing nested too deeply (> {} levels)'
                                     .format(type(self).MAX_NESTING))
            self._evaluate_token(token)
        except RPNError as e:
            if e.token is None:
                e.token = token
            raise
        finally:
            self.nesting -= 1

    def _evaluate_token(self, token):
        if self.function.capturing:
            body = self.function.feed(token)
            if body is not None:
                self.stack.push(body)
            return

        operator = OPERATORS.get(token)
        if operator is not None:
            logger.debug('Operator %s', token)
            operator.function(self)
            return

        groups = self.lexer.classify(token)
        kind = self.lexer.kind(groups)
        if kind == 'variable':
            self.call(groups['__variable__'])
        elif kind == 'name':
            self.pshname(groups['__name__'])
        else:
            self.stack.push(self.parse(groups))

    def parse(self, groups):
        '''
        Parse classified token groups into the value they stand for.
        '''
        if 'reference' in groups:
            return self._reference(groups['index'])
        elif 'exponent' in groups:
            return self._fconvert(groups['exponent'])
        elif 'suffixed' in groups:
            return self._sconvert(groups['scaled'], groups['suffix'])
        elif 'number' in groups:
            return self._iconvert(groups)
        raise MalformedLiteral('Not a literal: {}'.format(
            next(iter(groups.values()))))

    def _reference(self, index):
        '''
        Element at stack index, 1 being the top.
        '''
        if len(index.lstrip('0')) > len(str(self.stack.size())):
            raise IndexOutOfRange('Stack index {}... out of range 1..{}'
                                  .format(index[:8], self.stack.size()))
        return self.stack.at(int(index))

    @wrap_user_errors('Cannot convert {1}{2}')
    def _sconvert(self, scaled, suffix):
        '''
        Convert number scaled by a power of 1024 suffix.
        '''
        return wrap(int(scaled) * type(self).SUFFIXES[suffix.upper()])

    @wrap_user_errors('Cannot convert {1}')
    def _fconvert(self, number):
        '''
        Convert number with exponent, truncating the fraction.
        '''
        return wrap(int(float(number)))

    @wrap_user_errors('Cannot convert {1[number]}')
    def _iconvert(self, groups):
        '''
        Convert integer literal in any base, ignoring separators.
        '''
        base, digits = next((base, groups[kind])
                            for kind, base
                            in type(self).BASES.items()
                            if kind in groups)
        digits = digits.replace('.', '').replace('_', '')
        if not digits:
            raise MalformedLiteral('No digits in {}'.format(groups['number']))
        value = int(digits, base)
        if groups.get('sign') == '-':
            value = -value
        return wrap(value)

    def call(self, name):
        '''
        Push variable value, or run it if it's a function (a string).
        '''
        value = self.variables.get(name)
        if isinstance(value, str):
            logger.debug('Calling %s: %r', name, value)
            self._evaluate(value)
        else:
            self.stack.push(value)

    def pshname(self, name):
        '''
        Push a variable name, for = or del.
        '''
        if name in OPERATORS:
            raise ReservedNameConflict(
                'Reserved word cannot be used as variable name: {}'
                .format(name))
        self.stack.push(name)

    def render_top(self):
        '''
        One line status: stack size and top of stack.
        '''
        top = render(self.stack.top()) if self.stack else '<empty>'
        return 'top[sz:{:>2}] = {}'.format(self.stack.size(), top)

    def printtop(self):
        self.print(self.render_top())

    def printstack(self):
        '''
        Print all elements on the stack, numbered as for @idx.

        The bottom comes first, so the top ends up next to the prompt.
        '''
        for index, value in reversed(list(enumerate(self.stack.values(),
                                                    start=1))):
            self.print('{:>10} = {}'.format(index, render(value)))

    def printvars(self):
        for name, value in self.variables.entries():
            self.print('{:<10} = {}'.format(name, render(value)))

    def describe_operators(self):
        '''
        (name, description) of every operator, sorted by name.
        '''
        return [(name, operator.description)
                for name, operator
                in sorted(OPERATORS.items())]

    def printhelp(self):
        '''
        Print all reserved words and operators, and the grammar of the rest.
        '''
        self.print('Reserved words and operators:')
        for name, description in self.describe_operators():
            self.print('  {:<6} {}'.format(name, description))
        self.print('Stack reference:      @idx (1 is the top)')
        self.print("Variable assignment:  value 'varname' =")
        self.print("Function declaration: [ ... ] 'funcname' =")
