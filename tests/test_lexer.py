'''
Token classification tests
'''

import regex

from hexcalc.util import UnmatchedToken
from hexcalc.lexer import Lexer

from pytest import mark, raises


@mark.parametrize('token,kind', [
    ('@1', 'reference'),
    ('@12', 'reference'),
    ('1e3', 'exponent'),
    ('-2.5E+2', 'exponent'),
    ('4k', 'suffixed'),
    ('16M', 'suffixed'),
    ('2G', 'suffixed'),
    ('0b1010', 'number'),
    ('0XdEaD.bEeF', 'number'),
    ('0', 'number'),
    ('017', 'number'),
    ('-1_000', 'number'),
    ('foo', 'variable'),
    ('_bar2', 'variable'),
    ("'foo'", 'name'),
    ("'foo", 'name'),
])
def test_kinds(token, kind):
    l = Lexer()
    assert l.kind(l.classify(token)) == kind


def test_suffix_groups():
    l = Lexer()
    groups = l.classify('-3K')
    assert groups['scaled'] == '-3'
    assert groups['suffix'] == 'K'


def test_sign_only_where_given():
    l = Lexer()
    assert l.classify('-0x10')['sign'] == '-'
    assert 'sign' not in l.classify('0x10')


def test_quoted_name():
    l = Lexer()
    assert l.classify("'answer'")['__name__'] == 'answer'


@mark.parametrize('token', ['??', '0b', '0b2', '09', '1x', "'1abc'", '@',
                            '@x', 'foo-bar'])
def test_unmatched(token):
    l = Lexer()
    with raises(UnmatchedToken,
                match=regex.escape('Unmatched token: [{}]'.format(token))):
        l.classify(token)


def test_lex_splits_on_whitespace():
    l = Lexer()
    assert list(l.lex(' 1\t2  +\n')) == ['1', '2', '+']
    assert list(l.lex('')) == []


def test_isidentifier():
    l = Lexer()
    assert l.isidentifier('x_1')
    assert not l.isidentifier('1x')
    assert not l.isidentifier('1 1 +')
