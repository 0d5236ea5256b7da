class LegacyTableLoadError(ValueError):
    """
    Raised when legacy table file can't be loaded. The first problem found aborts the whole load,
    so there is always exactly one error per failed load.

    ::

        >>> Vocabulary.from_file('animal.dic')
        LegacyTableLoadError: animal.dic: (Line 3) Missing table name before entry list.
    """

    def __init__(self, path: str, line: int, message: str):
        self.path = path
        self.line = line
        self.message = message
        super().__init__(f"{path}: (Line {line}) {message}")
