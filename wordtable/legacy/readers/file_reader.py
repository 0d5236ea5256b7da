"""
.. autoclass:: BaseReader
    :members:

.. autoclass:: FileReader
.. autoclass:: ZipReader
"""

import io
from typing import Iterator, Tuple


BOM = '\ufeff'


class BaseReader:
    """
    Common base for :class:`FileReader` and :class:`ZipReader`. In fact, it is a very thin wrapper
    around ``IO``-alike object, to read it line by line and:

    * strip lines transparently
    * ignore BOM (byte-order mark) at the beginning
    * skip empty lines
    * yield line with its number (1-based)

    Can be used directly for in-memory sources::

        reader = BaseReader(io.StringIO("#name animal\\n> cat"))
        list(reader)
        # [(1, '#name animal'), (2, '> cat')]

    Args:
        obj: Text IO object
        path: Name of the source, used in error messages
    """

    def __init__(self, obj, path: str = '<string>'):
        self.path = path
        self.line_no = 0
        self.io = obj
        self.iter = filter(lambda l: l[1] != '', self.readlines())

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[int, str]:
        return self.iter.__next__()

    def readlines(self) -> Iterator[Tuple[int, str]]:
        ln = self.io.readline()
        while ln != '':
            self.line_no += 1
            if self.line_no == 1 and ln.startswith(BOM):
                ln = ln.replace(BOM, '', 1)
            yield (self.line_no, ln.strip())
            ln = self.io.readline()

    def close(self):
        self.io.close()


class FileReader(BaseReader):
    """
    Reader implementation for simple filesystem file.
    """

    def __init__(self, path: str, encoding: str = 'utf-8'):
        super().__init__(self._open(path, encoding), path=str(path))

    def _open(self, path, encoding):  # pylint: disable=no-self-use
        # errors='surrogateescape', so a stray byte in otherwise good file doesn't break the whole load
        return open(path, 'r', encoding=encoding, errors='surrogateescape')


class ZipReader(BaseReader):
    """
    Reader implementation for file inside zip archive.

    Args:
        zip_obj: Binary file object, as returned by ``ZipFile.open``
        path: Name of the source, used in error messages (typically ``archive.zip/member.dic``)
    """

    def __init__(self, zip_obj, path: str, encoding: str = 'utf-8'):
        super().__init__(self._open(zip_obj, encoding), path=path)

    def _open(self, zip_obj, encoding):  # pylint: disable=no-self-use
        return io.TextIOWrapper(zip_obj, encoding=encoding, errors='surrogateescape')
