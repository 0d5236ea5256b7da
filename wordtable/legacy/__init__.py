from .vocabulary import Vocabulary
from .data.table import Table
from .errors import LegacyTableLoadError

__all__ = [
    "Vocabulary",
    "Table",
    "LegacyTableLoadError"
]
