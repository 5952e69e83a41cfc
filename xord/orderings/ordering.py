from functools import cmp_to_key
from typing import Any, Callable, List, Sequence

LEFT_IS_GREATER = 1
RIGHT_IS_GREATER = -1


class Ordering:
    """Three-way comparator over values of some type.
       Subclasses implement `compare`; everything else is derived from it.
    """

    def compare(self, left: Any, right: Any) -> int:
        """
            Compares two values.
            OUTPUT: negative if left sorts before right, zero if they are tied, positive otherwise
        """
        raise NotImplementedError

    def __call__(self, left: Any, right: Any) -> int:
        return self.compare(left, right)

    def sort_key(self) -> Callable[[Any], Any]:
        """Adapts this ordering into a `key` function for `sorted`, `min`, `max` and friends."""
        return cmp_to_key(self.compare)

    def sort(self, items: Sequence[Any], return_index: bool = False) -> List[Any]:
        """Stable sort of `items`. If `return_index` is set, returns the positions of the input
           items in sorted order instead of the items themselves.
        """
        key = self.sort_key()
        index = sorted(range(len(items)), key=lambda i: key(items[i]))
        if return_index:
            return index
        return [items[i] for i in index]

    def min(self, items: Sequence[Any]) -> Any:
        return min(items, key=self.sort_key())

    def max(self, items: Sequence[Any]) -> Any:
        return max(items, key=self.sort_key())

    def is_ordered(self, items: Sequence[Any]) -> bool:
        return all(self.compare(a, b) <= 0 for a, b in zip(items, items[1:]))

    def is_strictly_ordered(self, items: Sequence[Any]) -> bool:
        return all(self.compare(a, b) < 0 for a, b in zip(items, items[1:]))
