from numbers import Integral
from typing import List, Optional, Sequence, Tuple

from tools import log


class RangeError(IndexError):
    """An index outside [0, n) was passed to a disjoint set."""

    def __init__(self, index, size):
        super().__init__(f"Index {index} out of range for disjoint set of size {size}.")
        self.index = index
        self.size = size


class CycleError(RuntimeError):
    """The parent links starting from an index never reach a root."""

    def __init__(self, index):
        super().__init__(f"Parent links from index {index} contain a cycle.")
        self.index = index


def _is_index(x):
    return isinstance(x, Integral) and not isinstance(x, bool)


class DisjointSet:
    """Disjoint Set Union data structure over the indices 0..n-1.

    Each slot holds the parent of an index, or None if the index is the root of
    its set. The naive `find` and `union` never modify the structure (`union`
    returns a modified copy), while `compressed_find` and `compressed_union`
    rewrite parent links in place. The compressed operations are not thread safe.

    See more at: https://cp-algorithms.com/data_structures/disjoint_set_union.html
    """

    def __init__(self, parents: Sequence[Optional[int]]):
        self.parent = list(parents)
        self.n = len(self.parent)
        for i, par in enumerate(self.parent):
            if par is None:
                continue
            if not _is_index(par):
                raise ValueError(f"Parent of {i} is not an index: {par!r}")
            if par == i:
                raise ValueError(f"Root {i} must be stored as None, not as a self loop.")
            self.parent[i] = self._check_index(par)

    @classmethod
    def singletons(cls, n_elements: int):
        """Create n_elements sets, each containing only itself."""
        if n_elements < 0:
            raise ValueError(f"Negative number of elements: {n_elements}")
        return cls([None] * n_elements)

    def _check_index(self, i) -> int:
        """Return i as a plain int, if it is a valid index."""
        if not _is_index(i):
            raise TypeError(f"Disjoint set indices must be integers, not {type(i).__name__}.")
        if not 0 <= i < self.n:
            raise RangeError(i, self.n)
        return int(i)

    def _path_to_root(self, i) -> List[int]:
        """Indices visited from i up to (and including) its root."""
        path = [i]
        par = self.parent[i]
        while par is not None:
            # a valid path never visits more than n nodes
            if len(path) >= self.n:
                raise CycleError(i)
            path.append(par)
            par = self.parent[par]
        return path

    def _compress(self, path) -> Tuple[int, int]:
        """Point every node of a path from _path_to_root at its root, return the root and the depth."""
        root = path[-1]
        for node in path[:-1]:
            self.parent[node] = root
        return root, len(path) - 1

    def find(self, i: int) -> int:
        """Get the root of the set, which contains i."""
        i = self._check_index(i)
        log.debug("find: %s", i)
        return self._path_to_root(i)[-1]

    def union(self, i: int, j: int) -> "DisjointSet":
        """Return a copy in which the sets of i and j are merged.

        The root of i's set is attached under the root of j's set. The structure
        itself is left unchanged.
        """
        i = self._check_index(i)
        j = self._check_index(j)
        log.debug("union: %s %s", i, j)
        x = self.find(i)
        y = self.find(j)

        res = self.copy()
        if x != y:
            res.parent[x] = y
        return res

    def compressed_find_depth(self, i: int) -> Tuple[int, int]:
        """Find the root of i, and point every node on the way directly to it.

        Returns
        -------
        root: root of the set containing i.
        depth: number of parent links followed from i, measured before the path is compressed.
        """
        i = self._check_index(i)
        return self._compress(self._path_to_root(i))

    def compressed_find(self, i: int) -> int:
        """Get the root of the set containing i, compressing the path to it."""
        root, _ = self.compressed_find_depth(i)
        return root

    def compressed_union(self, i: int, j: int):
        """Merge the sets of i and j in place.

        The root reached with the shorter path is attached under the other one,
        ties attach the set of i under the set of j. The depths come from the
        finds of this call, so they only approximate the ranks of the trees.
        """
        i = self._check_index(i)
        j = self._check_index(j)
        # walk both paths before rewriting anything, a cycle leaves the forest as it was
        path_i = self._path_to_root(i)
        path_j = self._path_to_root(j)
        x, x_depth = self._compress(path_i)
        y, y_depth = self._compress(path_j)

        if x != y:
            if x_depth > y_depth:
                self.parent[y] = x
            else:
                self.parent[x] = y

    def copy(self) -> "DisjointSet":
        res = DisjointSet.__new__(DisjointSet)
        res.parent = list(self.parent)
        res.n = self.n
        return res

    def to_list(self) -> List[Optional[int]]:
        return list(self.parent)

    def roots(self) -> List[int]:
        """Indices that represent a set, in increasing order."""
        return [i for i, par in enumerate(self.parent) if par is None]

    @property
    def n_sets(self) -> int:
        return sum(1 for par in self.parent if par is None)

    def sets(self) -> List[List[int]]:
        """Group the indices by set, without modifying the structure."""
        groups = {}
        for i in range(self.n):
            groups.setdefault(self.find(i), []).append(i)
        return sorted(groups.values(), key=lambda s: s[0])

    def __len__(self):
        return self.n

    def __getitem__(self, i):
        return self.parent[self._check_index(i)]

    def __eq__(self, other):
        if isinstance(other, DisjointSet):
            return self.parent == other.parent
        if isinstance(other, list):
            return self.parent == other
        return NotImplemented

    def __repr__(self):
        return f"DisjointSet({self.parent})"
