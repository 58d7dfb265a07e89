"""Column-order bookkeeping for column swaps."""


class Permutation:
    """Immutable map from current column position to original column index.

    ``perm[i]`` is the original index of the column now sitting at
    position ``i``.  ``swap`` returns a new tracker.
    """

    __slots__ = ("_order",)

    def __init__(self, order):
        self._order = tuple(order)

    @classmethod
    def identity(cls, size: int) -> "Permutation":
        return cls(range(size))

    def swap(self, i: int, j: int) -> "Permutation":
        order = list(self._order)
        order[i], order[j] = order[j], order[i]
        return Permutation(order)

    @property
    def is_identity(self) -> bool:
        return all(i == p for i, p in enumerate(self._order))

    def restore(self, values, fill=0) -> list:
        """Undo the swaps on a vector: ``out[perm[i]] = values[i]``."""
        out = [fill] * len(self._order)
        for i, original in enumerate(self._order):
            out[original] = values[i]
        return out

    def mapping(self) -> list[tuple[int, int]]:
        """``(position, original)`` pairs, both 0-based."""
        return list(enumerate(self._order))

    def __getitem__(self, i):
        return self._order[i]

    def __len__(self):
        return len(self._order)

    def __iter__(self):
        return iter(self._order)

    def __eq__(self, other):
        if isinstance(other, Permutation):
            return self._order == other._order
        if isinstance(other, (list, tuple)):
            return self._order == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._order)

    def __repr__(self):
        return f"Permutation({list(self._order)})"
