"""
Compact storage of word forms as edits of the base form. ``>> mouse/mice`` in the table file is
stored as base term ``mouse`` and edit script ``4:ice``: "cut 4 chars from the end of the base,
then add ``ice``". The edit always keeps the longest common prefix of both forms, which works well
for languages where forms differ by endings.

.. autofunction:: mark
.. autofunction:: apply
"""

import os.path


SEPARATOR = ':'


def mark(base: str, alt: str) -> str:
    """
    Encodes ``alt`` as edit script relative to ``base``::

        >>> mark('mouse', 'mice')
        '4:ice'
        >>> mark('cat', 'cats')
        '0:s'
    """

    keep = len(os.path.commonprefix([base, alt]))
    return f'{len(base) - keep}{SEPARATOR}{alt[keep:]}'


def apply(base: str, script: str) -> str:
    """
    Decodes edit script produced by :meth:`mark` back into the full form::

        >>> apply('mouse', '4:ice')
        'mice'

    Raises:
        ValueError: if script is malformed or wants to cut more than base has
    """

    strip, sep, add = script.partition(SEPARATOR)
    if not sep or not strip.isdigit():
        raise ValueError(f"Malformed diff script {script!r}")

    cut = int(strip)
    if cut > len(base):
        raise ValueError(f"Diff script {script!r} can't be applied to {base!r}")

    return base[:len(base) - cut] + add
