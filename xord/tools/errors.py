from typing import Any


class IncomparableValueError(TypeError):
    """Raised when an ordering is asked to compare a value it does not know how to rank."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Cannot compare value: {value!r}")
        self.value = value

    def __reduce__(self):
        return (self.__class__, (self.value,))


class DuplicateValueError(ValueError):
    """Raised when an explicit order lists the same value more than once."""

    def __init__(self, value: Any, first_rank: int, duplicate_rank: int) -> None:
        super().__init__(f"Duplicate value {value!r} at positions {first_rank} and {duplicate_rank}")
        self.value = value
        self.first_rank = first_rank
        self.duplicate_rank = duplicate_rank

    def __reduce__(self):
        return (self.__class__, (self.value, self.first_rank, self.duplicate_rank))
