from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, Optional

from loguru import logger

from xord.tools.errors import DuplicateValueError


class RankMap(Mapping):
    """Immutable mapping of values to their zero-based rank in an explicit order.
       Iteration follows rank order. Unhashable values are never members.
    """

    def __init__(self, ranks: Optional[Dict[Any, int]] = None) -> None:
        ranks = dict(ranks or {})
        assert sorted(ranks.values()) == list(range(len(ranks))), "Ranks must be unique and contiguous from 0."
        # keeps keys in rank order, so iteration matches the explicit order
        self._ranks = dict(sorted(ranks.items(), key=lambda item: item[1]))
        self._hash = None

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> "RankMap":
        """Assigns ranks to values in the order they are listed. Listing a value twice is an error."""
        ranks = {}
        for rank, value in enumerate(values):
            if value in ranks:
                raise DuplicateValueError(value, ranks[value], rank)
            ranks[value] = rank

        logger.trace(f"Built rank map over {len(ranks)} values")
        return cls(ranks)

    def __getitem__(self, value: Any) -> int:
        try:
            return self._ranks[value]
        except TypeError as error:
            # unhashable values are never ranked
            raise KeyError(value) from error

    def __contains__(self, value: Any) -> bool:
        try:
            return value in self._ranks
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self._ranks)

    def __len__(self) -> int:
        return len(self._ranks)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._ranks.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"RankMap({self._ranks!r})"

    def __reduce__(self):
        return (self.__class__, (self._ranks,))
