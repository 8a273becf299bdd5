"""
Helper functions used by the directive resolvers.
"""
import math
import re

INT_RE = re.compile(r'[+-]?[0-9]+')
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def gcd(a, b):
    """
    Return the greatest common divisor of two non negative integers.

    >>> gcd(50, 100)
    50
    >>> gcd(7, 0)
    7
    """
    return math.gcd(a, b)


def lcm(a, b):
    """
    Return the least common multiple of two positive integers.

    >>> lcm(2, 3)
    6
    >>> lcm(4, 6)
    12
    """
    return math.lcm(a, b)


def full_qualified_name(namespace, name):
    """
    Return the namespace/name identity of a namespaced object.

    >>> full_qualified_name('default', 'mypwd')
    'default/mypwd'
    """
    return "{}/{}".format(namespace, name)


def split(value, sep):
    """
    Split value on sep and strip white spaces around every item.

    >>> split('10.0.0.0/8, 192.168.0.0/16', ',')
    ['10.0.0.0/8', '192.168.0.0/16']
    >>> split('', ',')
    []
    """
    if value == "":
        return []
    return [item.strip() for item in value.split(sep)]


def parse_int(value):
    """
    Parse a decimal integer, signs are accepted but white spaces and underscores are not.
    Values must fit in 64 bits.

    >>> parse_int('-12')
    -12
    >>> parse_int('1.5')
    Traceback (most recent call last):
    ...
    ValueError: parsing '1.5': invalid syntax
    """
    if not INT_RE.fullmatch(value):
        raise ValueError("parsing '{}': invalid syntax".format(value))
    number = int(value)
    if number < INT64_MIN or number > INT64_MAX:
        raise ValueError("parsing '{}': value out of range".format(value))
    return number
