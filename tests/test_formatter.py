'''
Multi-base rendering tests
'''

from hexcalc.formatter import render, sep_s, unsigned, field

from pytest import mark


def fields(value):
    return [f.strip() for f in render(value).split(' | ')]


@mark.parametrize('digits,blockwidth,expected', [
    ('1234567', 3, '1.234.567'),
    ('-1234567', 3, '-1.234.567'),
    ('12', 3, '12'),
    ('123', 3, '123'),
    ('-12', 3, '-12'),
    ('deadbeef', 4, 'dead.beef'),
    ('00000000', 4, '0000.0000'),
])
def test_sep_s(digits, blockwidth, expected):
    assert sep_s(digits, blockwidth) == expected


def test_field_pads_but_never_truncates():
    assert field('12', 6, 3, '+') == '   +12'
    assert field('1234567', 6, 3, '+') == '+1.234.567'


def test_zero():
    assert fields(0) == [
        '0x0000.0000',
        '0b0000.0000.0000.0000.0000.0000.0000.0000',
        '+0',
        '0',
        '00',
    ]


def test_minus_one():
    assert fields(-1) == [
        '0xffff.ffff',
        '0b1111.1111.1111.1111.1111.1111.1111.1111',
        '-1',
        '4.294.967.295',
        '037.777.777.777',
    ]


def test_widths():
    hexval, binval, decval, udecval, octval = render(255).split(' | ')
    assert hexval == '0x0000.00ff'
    assert decval == ' ' * 13 + '+255'
    assert udecval == ' ' * 14 + '255'
    assert octval == ' ' * 23 + '0377'
    assert binval == '0b0000.0000.0000.0000.0000.0000.1111.1111'


def test_grouped_decimal():
    assert fields(1234567)[2:4] == ['+1.234.567', '1.234.567']


def test_negative_decimal_keeps_sign():
    assert render(-1234).split(' | ')[2] == ' ' * 10 + ' -1.234'


def test_wide_values():
    assert fields(1 << 40)[0] == '0x100.0000.0000'
    assert fields(-(1 << 40))[0] == '0xffff.ff00.0000.0000'


def test_unsigned():
    assert unsigned(5) == 5
    assert unsigned(-1) == 0xffffffff
    assert unsigned(-(1 << 31)) == 0x80000000
    assert unsigned(-(1 << 31) - 1) == 0xffffffff7fffffff


def test_text():
    assert render('1 1 +') == "'1 1 +'"
