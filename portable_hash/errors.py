class PortableHashError(ValueError):
    """Base class for malformed portable-hash input."""

class InvalidSymbol(PortableHashError):
    """A character or index that is not part of the 64-symbol alphabet."""

class InvalidIterationCount(PortableHashError):
    def __init__(self, count_log2=None):
        self.count_log2 = count_log2
        super().__init__(f"Invalid iteration count log2: {count_log2!r} (expected 7..30)")

class InvalidSaltLength(PortableHashError):
    def __init__(self, salt: str):
        self.length = len(salt)
        super().__init__(f"Invalid salt length: {self.length} (expected 8)")
