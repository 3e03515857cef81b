'''
Multi-base rendering of stack values.

An integer is shown as five fixed-width columns: hex, binary, signed decimal,
unsigned decimal and octal, digits grouped with dots::

    0x0000.00ff |  0b0000.0000.0000.0000.0000.0000.1111.1111 | ...
'''

SEPARATOR = ' | '


def unsigned(value):
    '''
    Reinterpret value as unsigned: 32 bits wide if it fits a signed 32-bit
    integer, 64 bits otherwise.
    '''
    if value >= 0:
        return value
    if value >= -(1 << 31):
        return value + (1 << 32)
    return value + (1 << 64)


def sep_s(s, blockwidth):
    '''
    Split digit string s into blocks of blockwidth characters, counted from
    the right, separated with dots. A leading minus sign is kept in front.

    >>> sep_s('1234567', 3)
    '1.234.567'
    '''
    if s.startswith('-'):
        sign, s = '-', s[1:]
    else:
        sign = ''
    if len(s) > blockwidth:
        head, tail = s[:-blockwidth], s[-blockwidth:]
        return sign + sep_s(head, blockwidth) + '.' + tail
    return sign + s


def field(digits, width, blockwidth, prefix):
    '''
    Group digits, prefix them, and right-justify in width.

    Never truncates: a result wider than width is returned as is.
    '''
    return (prefix + sep_s(digits, blockwidth)).rjust(width)


def render(value):
    '''
    Display string for a stack or variable value.
    '''
    if isinstance(value, str):
        return "'{}'".format(value)
    bits = unsigned(value)
    return SEPARATOR.join([
        field(format(bits, '08x'), 8 + 3, 4, '0x'),
        field(format(bits, '032b'), 32 + 3, 4, '0b'),
        field(format(value, 'd'), 14 + 3, 3, ' ' if value < 0 else '+'),
        field(format(bits, 'd'), 14 + 3, 3, ''),
        field(format(bits, 'o'), 24 + 3, 3, '0'),
    ])
