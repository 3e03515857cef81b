from functools import reduce
import operator

import regex

from .util import UnmatchedToken


class Lexer:
    '''
    Lexer for the hexcalc *regular* token grammar.

    Lines are whitespace-separated tokens. Operators are looked up by the
    machine before a token ever gets here; this classifies everything else.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # @3: third element from the top of the stack
    REFERENCE = r'''
                 @
                 (?<index>[0-9]+)
                 '''
    # 1e3, -2.5E+2. Truncated to an integer.
    EXPONENT = r'''
                [+-]?
                [1-9][0-9]*
                \.?
                [0-9]*
                [eE]
                [+-]?
                [0-9]+
                '''
    # 4k, 16M, 2G: powers of 1024
    SUFFIXED = r'''
                (?<scaled>
                    [+-]?
                    [1-9][0-9]*
                )
                (?<suffix>[GMKgmk])
                '''
    # Integer literal in any base. Underscores and dots are only there for
    # the reader's benefit, e.g. 0xdead.beef or 1_000_000.
    NUMBER = r'''
              (?<sign>[+-]?)
              (?:
                  (?:
                      0[bB]
                      (?<bin>[01_.]+)
                  )|(?:
                      0[xX]
                      (?<hex>[0-9a-fA-F_.]+)
                  )|(?:
                      # 0 alone is octal too. Doesn't matter.
                      (?<oct>0[0-7_.]*)
                  )|(?:
                      (?<dec>[1-9][0-9_.]*)
                  )
              )
              '''
    IDENTIFIER = r'[A-Za-z_][A-Za-z0-9_]*'
    # Bare identifier: variable value, or function call
    VARIABLE = r'(?<__variable__>' + IDENTIFIER + r')'
    # 'name' or 'name, pushed as a string for = and del
    NAME = r'''
            '
            (?<__name__>''' + IDENTIFIER + r''')
            '?
            '''

    # All possible tokens, in order of precedence.
    TOKEN = r'(?<reference>' + REFERENCE + r')|' \
            r'(?<exponent>' + EXPONENT + r')|' \
            r'(?<suffixed>' + SUFFIXED + r')|' \
            r'(?<number>(?:' + NUMBER + r'))|' \
            r'(?<variable>' + VARIABLE + r')|' \
            r'(?<name>' + NAME + r')'
    # Default regex flags for matching tokens
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    KINDS = ('reference', 'exponent', 'suffixed', 'number', 'variable',
             'name')

    def lex(self, line):
        '''
        Take a line and yield all tokens.
        '''
        yield from line.split()

    def isidentifier(self, name):
        return regex.fullmatch(type(self).IDENTIFIER, name) is not None

    def classify(self, token):
        '''
        Return the matched groups of token, keyed by group name.

        Exactly one of KINDS is among the keys. Raises UnmatchedToken if the
        token isn't part of the grammar.
        '''
        match = regex.fullmatch(type(self).TOKEN, token,
                                flags=type(self).FLAGS)
        if match is None:
            raise UnmatchedToken('Unmatched token: [{}]'.format(token),
                                 token=token)
        return self.matchedgroups(match)

    def kind(self, groups):
        '''
        Name of the kind of token the groups were matched from.
        '''
        return next(kind for kind in type(self).KINDS if kind in groups)

    def matchedgroups(self, match):
        '''
        Non-empty groups of a token match.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
