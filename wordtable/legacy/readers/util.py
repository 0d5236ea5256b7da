"""
String helpers used while reading directives and properties.

.. autofunction:: validate_name
.. autofunction:: split_args
.. autofunction:: unescape
"""

import re
from typing import List


NAME_REGEXP = re.compile(r'^[a-zA-Z0-9_\-]+$')
ARG_REGEXP = re.compile(r'"((?:\\.|[^"\\])*)"|(\S+)')
ESCAPE_REGEXP = re.compile(r'\\(u[0-9a-fA-F]{4}|.)')

ESCAPES = {'n': '\n', 'r': '\r', 't': '\t', 's': ' '}


def validate_name(name: str) -> bool:
    """
    Whether the string can be used as table name, class name and alike: only latin letters, digits,
    underscores and hyphens.
    """
    return bool(NAME_REGEXP.match(name))


def split_args(text: str) -> List[str]:
    """
    Splits directive text into arguments by whitespace. Double-quoted part is one argument, even if
    it has spaces (or is empty)::

        >>> split_args('type animal "cat dog" *')
        ['type', 'animal', 'cat dog', '*']
        >>> split_args('type animal "cat dog" ""')
        ['type', 'animal', 'cat dog', '']
    """

    result = []
    for match in ARG_REGEXP.finditer(text):
        quoted, bare = match.groups()
        if quoted is not None:
            result.append(quoted.replace('\\"', '"'))
        else:
            result.append(bare)
    return result


def unescape(text: str) -> str:
    r"""
    Handles backslash escapes in string literal: ``\n``, ``\r``, ``\t``, ``\s`` (space) and
    ``\uXXXX``. Any other escaped char stands for itself (so ``\\`` is backslash, ``\?`` is question
    mark).
    """

    def _replace(match):
        code = match.group(1)
        if len(code) == 5:
            return chr(int(code[1:], 16))
        return ESCAPES.get(code, code)

    return ESCAPE_REGEXP.sub(_replace, text)
