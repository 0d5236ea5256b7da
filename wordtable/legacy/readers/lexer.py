"""
Splits legacy table source into tokens. Each non-empty line of the file is exactly one token,
and the kind of token is defined by the line's prefix:

.. code-block:: text

    // comment, ignored
    #name animal          directive
    #subs singular plural
    > cat/cats            entry: all forms spelled out
    | class pet           property of the last entry
    | pron kat/kats
    >> mouse/mice         diff entry: forms after the first are stored as edits of the first

.. autoclass:: Token
.. autofunction:: tokenize
"""

from enum import Enum
from typing import Iterator, NamedTuple

from wordtable.legacy.errors import LegacyTableLoadError
from wordtable.legacy.readers.file_reader import BaseReader


TokenType = Enum('TokenType', 'DIRECTIVE ENTRY DIFF_ENTRY PROPERTY')

# Order matters: ">>" should be checked before ">"
PREFIXES = [
    ('#', TokenType.DIRECTIVE),
    ('>>', TokenType.DIFF_ENTRY),
    ('>', TokenType.ENTRY),
    ('|', TokenType.PROPERTY),
]

COMMENT = '//'


class Token(NamedTuple):
    """
    One lexical token: its kind, 1-based line in source, and the line's text without prefix
    (stripped).
    """

    type: TokenType
    line: int
    value: str


def tokenize(source: BaseReader) -> Iterator[Token]:
    """
    Lazily produces tokens from source, in file order.

    Raises:
        LegacyTableLoadError: if some line has none of known prefixes
    """

    for num, line in source:
        if line.startswith(COMMENT):
            continue

        for prefix, token_type in PREFIXES:
            if line.startswith(prefix):
                yield Token(token_type, num, line[len(prefix):].strip())
                break
        else:
            raise LegacyTableLoadError(source.path, num, f"Unexpected line: {line!r}")
