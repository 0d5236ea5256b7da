"""
Custom entry types, declared in the table header:

.. code-block:: text

    #type gender "male female neuter" "noun !proper"

This reads: "each entry having class ``noun`` and not having class ``proper`` should have exactly one
of classes ``male``, ``female``, ``neuter``". The values are assigned by property with the type's
name (``| gender female``), which is checked for validity immediately, and the "exactly one" rule is
checked after the whole file is read.

Filter ``*`` makes the type apply to every entry. Empty filter (``""``) makes the type apply to
*no* entries: the only effect of such type is then the validation of values assigned with its
property.

.. autoclass:: TypeDefFilter
    :members:

.. autoclass:: TypeDef
    :members:
"""

import re
from dataclasses import dataclass, field
from typing import List, Set, Tuple, Optional

from wordtable.legacy.data.entry import Entry


FILTER_PART_REGEXP = re.compile(r'!?\w+')
WILDCARD = '*'


@dataclass
class TypeDefFilter:
    """
    Conjunction of class presence/absence checks. Each part is ``(class name, required)``:
    ``required=False`` means the entry should *not* have the class.

    Filter tokens having no word characters at all are dropped; any other token is kept as is,
    only leading ``!`` stripped (so ``!!plant`` is "no ``plant``", and ``(animate)`` is a class
    name no entry is likely to have).
    """

    parts: List[Tuple[str, bool]] = field(default_factory=list)
    wildcard: bool = False

    @classmethod
    def parse(cls, expression: str) -> 'TypeDefFilter':
        if expression.strip() == WILDCARD:
            return cls(wildcard=True)

        return cls(parts=[
            (part.lstrip('!'), not part.startswith('!'))
            for part in expression.split()
            if FILTER_PART_REGEXP.search(part)
        ])

    def applies(self, entry: Entry) -> bool:
        if self.wildcard:
            return True
        return all(entry.has_class(name) == required for name, required in self.parts)


@dataclass
class TypeDef:
    """
    Named type: set of valid values, and the filter defining which entries should have one.
    """

    name: str
    classes: Set[str]
    filter: Optional[TypeDefFilter] = None

    def is_valid_value(self, value: str) -> bool:
        return value in self.classes

    def test(self, entry: Entry) -> bool:
        """
        Whether the entry satisfies the type. Entries the filter doesn't apply to satisfy it
        trivially; and if there is no filter at all, it applies to nothing.
        """

        if self.filter is None or not self.filter.applies(entry):
            return True
        return sum(1 for cls in entry.classes if self.is_valid_value(cls)) == 1
