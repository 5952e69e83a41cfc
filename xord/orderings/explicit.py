from enum import Enum
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from xord.orderings.ordering import LEFT_IS_GREATER, RIGHT_IS_GREATER, Ordering
from xord.tools.errors import IncomparableValueError
from xord.tools.ranks import RankMap


class UnrankedPosition(str, Enum):
    first = "first"
    last = "last"

    def __str__(self) -> str:
        return self.name


class ExplicitOrdering(Ordering):
    """Orders values by their position in an explicitly given sequence.
       Comparing a value that is not part of the sequence raises `IncomparableValueError`;
       use `unknowns_first` or `unknowns_last` to tolerate such values instead.
    """

    def __init__(self, values: Union[Iterable[Any], RankMap]) -> None:
        self.rank_map = values if isinstance(values, RankMap) else RankMap.from_values(values)

    @classmethod
    def from_rank_map(cls, rank_map: RankMap) -> "ExplicitOrdering":
        return cls(rank_map)

    @property
    def values(self) -> Tuple[Any, ...]:
        return tuple(self.rank_map)

    def compare(self, left: Any, right: Any) -> int:
        return self.rank(left) - self.rank(right) # both ranks are non-negative

    def rank(self, value: Any) -> int:
        try:
            return self.rank_map[value]
        except KeyError:
            raise IncomparableValueError(value) from None

    def ranks(self, items: Sequence[Any]) -> np.ndarray:
        return np.fromiter((self.rank(item) for item in items), dtype=np.int64, count=len(items))

    def sort(self, items: Sequence[Any], return_index: bool = False) -> List[Any]:
        index = np.argsort(self.ranks(items), kind="stable").tolist()
        if return_index:
            return index
        return [items[i] for i in index]

    def unknowns_first(self) -> "UnrankedValueOrdering":
        return UnrankedValueOrdering(self, UnrankedPosition.first)

    def unknowns_last(self) -> "UnrankedValueOrdering":
        return UnrankedValueOrdering(self, UnrankedPosition.last)

    def __contains__(self, value: Any) -> bool:
        return value in self.rank_map

    def __len__(self) -> int:
        return len(self.rank_map)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ExplicitOrdering):
            return NotImplemented
        return self.rank_map == other.rank_map

    def __hash__(self) -> int:
        return hash(self.rank_map)

    def __repr__(self) -> str:
        return f"Ordering.explicit({list(self.rank_map)!r})"


class UnrankedValueOrdering(Ordering):
    """Wraps an explicit ordering so that values missing from it sort before (`first`)
       or after (`last`) every known value. Unknown values are tied with each other.
    """

    def __init__(self, ordering: ExplicitOrdering, position: UnrankedPosition) -> None:
        assert isinstance(ordering, ExplicitOrdering), "Only explicit orderings can place unknown values."
        self.ordering = ordering
        self.position = UnrankedPosition(position)

    def compare(self, left: Any, right: Any) -> int:
        has_left = left in self.ordering.rank_map
        has_right = right in self.ordering.rank_map

        if has_left != has_right:
            if self.position == UnrankedPosition.first:
                return LEFT_IS_GREATER if has_left else RIGHT_IS_GREATER
            return RIGHT_IS_GREATER if has_left else LEFT_IS_GREATER
        elif not has_left:
            return 0

        return self.ordering.compare(left, right)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UnrankedValueOrdering):
            return NotImplemented
        return self.position == other.position and self.ordering == other.ordering

    def __hash__(self) -> int:
        return hash((self.ordering, self.position))

    def __repr__(self) -> str:
        return f"{self.ordering!r}.unknowns_{self.position.value}()"


def explicit(values: Iterable[Any]) -> ExplicitOrdering:
    """Returns an ordering that compares values by their position in `values`."""
    return ExplicitOrdering(values)


def explicit_of(least: Any, *remaining: Any) -> ExplicitOrdering:
    """Same as `explicit`, with the values passed as arguments, least first."""
    return ExplicitOrdering([least, *remaining])
