"""
The module represents the whole vocabulary table, read from legacy ``*.dic`` file.

The table has a name, a fixed number of subtypes (named positions of word forms, like "singular"
and "plural"), a list of :class:`Entry <wordtable.legacy.data.entry.Entry>`, and a set of hidden
classes: entries with those classes are not selected unless explicitly asked for.

Table is filled by :meth:`read_table <wordtable.legacy.readers.table.read_table>` and then
*committed*: after that, it can't be changed anymore.

.. autoclass:: Table
"""

from typing import List, Iterable, Optional, Tuple

from wordtable.legacy.data.entry import Entry


class Table:
    """
    Typically, ``wordtable`` user shouldn't create the instance of this class by themselves, it is
    created when the file is read::

        >>> vocabulary = Vocabulary.from_file('tables/noun.dic')
        >>> vocabulary.table
        Table(noun: singular/plural, 1024 entries)

    **Creation**

    .. automethod:: add_subtype
    .. automethod:: add_entry
    .. automethod:: commit

    **Querying**

    .. automethod:: subtype_index
    """

    def __init__(self, name: str, subtype_count: int, hidden_classes: Iterable[str] = ('nsfw',)):
        self.name = name
        self.subtype_count = subtype_count
        self.hidden_classes = frozenset(hidden_classes)

        self._subtypes: List[Optional[str]] = [None] * subtype_count
        self._entries: List[Entry] = []
        self.committed = False

    def add_subtype(self, name: str, index: int):
        """
        Registers the subtype name for position ``index``.
        """

        self._check_open()
        if not 0 <= index < self.subtype_count:
            raise IndexError(f"Subtype index {index} is out of range for table '{self.name}'")
        self._subtypes[index] = name

    def add_entry(self, entry: Entry):
        self._check_open()
        self._entries.append(entry)

    def commit(self):
        """
        Finalizes the table; no subtypes or entries can be added after this.
        """

        self._check_open()
        self.committed = True

    @property
    def subtypes(self) -> Tuple[Optional[str], ...]:
        return tuple(self._subtypes)

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def subtype_index(self, name: Optional[str]) -> int:
        """
        Position of the subtype by its name. ``None`` means the first (default) subtype.

        Raises:
            LookupError: if the table has no such subtype
        """

        if name is None:
            return 0
        try:
            return self._subtypes.index(name.lower())
        except ValueError:
            raise LookupError(f"Table '{self.name}' has no subtype '{name}' (subtypes: {self._subtypes!r})") from None

    def _check_open(self):
        if self.committed:
            raise RuntimeError(f"Table '{self.name}' is already committed")

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __repr__(self):
        return f"Table({self.name}: {'/'.join(str(s) for s in self._subtypes)}, {len(self._entries)} entries)"
