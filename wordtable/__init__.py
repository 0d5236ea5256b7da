from .legacy import Vocabulary, Table, LegacyTableLoadError

__all__ = [
    "Vocabulary",
    "Table",
    "LegacyTableLoadError"
]
