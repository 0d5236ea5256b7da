"""
The module represents one entry of the table: word forms and everything attached to them.

In the source, entry looks like this:

.. code-block:: text

    > cat/cats
    | class pet small?
    | pron kat/kats
    | weight 3

``Term``: one word form
-----------------------

.. autoclass:: Term

``Entry``: table record
-----------------------

.. autoclass:: Entry
    :members:
"""

from dataclasses import dataclass, field
from typing import List, Set, Iterable, Optional

from wordtable.legacy.algo import diff


@dataclass
class Term:
    """
    One form of the word, in one of the table's subtypes (singular, plural, ...).
    """

    #: Text of the form. For forms after the first in diff entry it is edit script, see
    #: :meth:`Entry.form`
    value: str
    #: Pronunciation, if set by ``pron`` property
    pronunciation: Optional[str] = None


@dataclass
class Entry:
    """
    One record of the table. Terms are positional: ``terms[i]`` is the form for the table's ``i``-th
    subtype.

    Classes are the tags of the entry, used for filtering on selection and checked by type
    definitions. Optional classes (``class small?`` in source) are also present in :attr:`classes`,
    and additionally listed in :attr:`optional_classes`: selection treats them as "might or might
    not have".
    """

    terms: List[Term]
    classes: Set[str] = field(default_factory=set)
    #: Subset of :attr:`classes`
    optional_classes: Set[str] = field(default_factory=set)
    #: Relative probability of selection
    weight: int = 1
    #: Whether terms after the first are stored as edit scripts
    diff: bool = False

    @classmethod
    def build(cls, values: Iterable[str], classes: Iterable[str], *, diff: bool = False) -> 'Entry':
        """
        Creates entry from the list of form strings. ``classes`` is copied, so the passed set can be
        changed further without affecting the entry.
        """
        return cls(terms=[Term(value) for value in values], classes=set(classes), diff=diff)

    @property
    def term_count(self) -> int:
        return len(self.terms)

    def __getitem__(self, index: int) -> Term:
        return self.terms[index]

    def add_class(self, name: str, optional: bool = False):
        self.classes.add(name)
        if optional:
            self.optional_classes.add(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def form(self, index: int) -> str:
        """
        Full text of the form for subtype ``index``, decoding the edit script if necessary.
        """

        value = self.terms[index].value
        if self.diff and index > 0:
            return diff.apply(self.terms[0].value, value)
        return value

    def __str__(self):
        return self.terms[0].value if self.terms else ''

    def __repr__(self):
        return f"Entry({'/'.join(term.value for term in self.terms)} ~{','.join(sorted(self.classes))})"
