from __future__ import annotations

import io
import zipfile

from typing import Iterable, Iterator, Optional

from wordtable.legacy.data.entry import Entry
from wordtable.legacy.data.table import Table
from wordtable.legacy.readers import FileReader, ZipReader, BaseReader, read_table
from wordtable.legacy.algo.select import Query, Selector


class Vocabulary:
    """
    The main interface to ``wordtable.legacy`` as a library.

    Usage::

        from wordtable import Vocabulary

        vocabulary = Vocabulary.from_file('/path/to/tables/noun.dic')
        # or, from zip archive with table file
        vocabulary = Vocabulary.from_zip('/path/to/tables.zip', 'noun.dic')

        print(vocabulary.select('plural', classes=['animal']))
        # wolves

        for entry in vocabulary.entries(classes=['animal'], exclude=['pet']):
            print(entry)
        # wolf
        # bear

    Internal implementation of selection is exposed as :attr:`selector` to allow experimenting.

    **Vocabulary creation**

    .. automethod:: from_file
    .. automethod:: from_zip
    .. automethod:: from_string

    **Vocabulary usage**

    .. automethod:: select
    .. automethod:: entries

    **Data objects**

    .. autoattribute:: table
    .. autoattribute:: selector
    """

    #: The table read
    table: Table
    #: Instance of ``Selector``, see :mod:`algo.select <wordtable.legacy.algo.select>`.
    selector: Selector

    @classmethod
    def from_file(cls, path: str, encoding: str = 'utf-8') -> Vocabulary:
        """
        Read table from ``*.dic`` file.
        """

        reader = FileReader(path, encoding=encoding)
        try:
            return cls(read_table(reader))
        finally:
            reader.close()

    @classmethod
    def from_zip(cls, path: str, member: Optional[str] = None, encoding: str = 'utf-8') -> Vocabulary:
        """
        Read table from zip archive.

        Args:
            path: Path to zip-file
            member: Name of table file inside archive; if not passed, the archive should contain
                    exactly one ``*.dic`` file.
        """

        with zipfile.ZipFile(path) as file:
            if member is None:
                candidates = [name for name in file.namelist() if name.endswith('.dic')]
                if len(candidates) != 1:
                    raise LookupError(f"Expected exactly one .dic file in {path}, found {candidates!r}")
                member = candidates[0]

            with file.open(member) as zip_obj:
                return cls(read_table(ZipReader(zip_obj, f'{path}/{member}', encoding=encoding)))

    @classmethod
    def from_string(cls, text: str, path: str = '<string>') -> Vocabulary:
        """
        Read table from source text.
        """

        return cls(read_table(BaseReader(io.StringIO(text), path=path)))

    def __init__(self, table: Table):
        self.table = table
        self.selector = Selector(table)

    def select(self, subtype: Optional[str] = None, *,
               classes: Iterable[str] = (), exclude: Iterable[str] = (),
               include_hidden: bool = False, rng=None) -> Optional[str]:
        """
        Random (weighted) word matching conditions, or ``None`` if there is no such word.

        ::

            >>> vocabulary.select('plural', classes=['animal'], exclude=['pet'])
            'wolves'

        Args:
            subtype: Name of the form to return, first (default) subtype if not passed
            classes: Classes the entry should have
            exclude: Classes the entry should not have
            include_hidden: Whether entries with table's hidden classes can be selected
            rng: ``random.Random`` instance, to make selection reproducible
        """

        query = Query.build(subtype, classes=classes, exclude=exclude, include_hidden=include_hidden)
        if rng is None:
            return self.selector(query)
        return self.selector(query, rng)

    def entries(self, *, classes: Iterable[str] = (), exclude: Iterable[str] = (),
                include_hidden: bool = False) -> Iterator[Entry]:
        """
        All entries matching conditions, in table order (see :meth:`select` for arguments meaning).
        """

        yield from self.selector.matches(
            Query.build(classes=classes, exclude=exclude, include_hidden=include_hidden)
        )
