"""
Choosing words from the table.

:class:`Query` describes what is needed ("plural form of some animal that is not a pet"), and
:class:`Selector` finds matching entries and picks one randomly, respecting entries' weights::

    selector = Selector(table)
    selector(Query(subtype='plural', classes={'animal'}, exclude={'pet'}))
    # => 'wolves'

Class rules:

* the entry should have all of query's ``classes`` and none of ``exclude``;
* *optional* class of the entry (``| class small?``) never prevents matching: the entry is
  considered having it for ``classes`` and not having it for ``exclude``;
* the entries having any of the table's hidden classes are skipped, unless the query asks for
  that class explicitly or has ``include_hidden``.

.. autoclass:: Query
.. autoclass:: Selector
    :members:
"""

import random
from dataclasses import dataclass
from typing import Iterator, Optional, FrozenSet, Iterable

from wordtable.legacy.data.entry import Entry
from wordtable.legacy.data.table import Table


@dataclass(frozen=True)
class Query:
    #: Subtype name, ``None`` for the first one
    subtype: Optional[str] = None
    classes: FrozenSet[str] = frozenset()
    exclude: FrozenSet[str] = frozenset()
    include_hidden: bool = False

    @classmethod
    def build(cls, subtype: Optional[str] = None, *,
              classes: Iterable[str] = (), exclude: Iterable[str] = (),
              include_hidden: bool = False) -> 'Query':
        return cls(subtype, frozenset(classes), frozenset(exclude), include_hidden)


class Selector:
    """
    Args:
        table: Table to select from
    """

    def __init__(self, table: Table):
        self.table = table

    def __call__(self, query: Query, rng=random) -> Optional[str]:
        """
        Picks random matching entry (probability is proportional to the entry's weight) and returns
        its form for query's subtype. Returns ``None`` if nothing matches.

        Args:
            query: What to search
            rng: Source of randomness (``random.Random`` instance, or ``random`` module itself)
        """

        index = self.table.subtype_index(query.subtype)

        candidates = [entry for entry in self.matches(query) if entry.weight > 0]
        if not candidates:
            return None

        entry, = rng.choices(candidates, weights=[entry.weight for entry in candidates])
        return entry.form(index)

    def matches(self, query: Query) -> Iterator[Entry]:
        """
        All entries matching the query, in table order.
        """

        hidden = self.table.hidden_classes - query.classes
        for entry in self.table:
            if self.match(entry, query, hidden=hidden):
                yield entry

    def match(self, entry: Entry, query: Query, *, hidden: FrozenSet[str]) -> bool:  # pylint: disable=no-self-use
        mandatory = entry.classes - entry.optional_classes

        if not query.classes <= entry.classes:
            return False
        if query.exclude & mandatory:
            return False
        if not query.include_hidden and hidden & mandatory:
            return False
        return True
