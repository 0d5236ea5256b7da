from .file_reader import BaseReader, FileReader, ZipReader
from .table import read_table

__all__ = [
    "BaseReader",
    "FileReader",
    "ZipReader",
    "read_table"
]
