__all__ = ("LFUCacheError", "InvalidCapacity")


class LFUCacheError(Exception): ...


class InvalidCapacity(LFUCacheError, ValueError):
    def __init__(self, message: str = "Capacity cannot be less than or equal to zero.") -> None:
        super().__init__(message)
