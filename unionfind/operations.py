from typing import List, Optional, Tuple

from tools.data_structures import DisjointSet

MODES = ("naive", "compressed")

# number of index arguments of each operation
ARITY = {
    "find": 1,
    "union": 2,
}


def parse_operation(text: str) -> Tuple[str, Tuple[int, ...]]:
    """Parse an operation like 'find 3' or 'union 1 2' into its verb and index arguments."""
    parts = text.split()
    if not parts:
        raise ValueError("Empty operation.")
    verb = parts[0].lower()
    if verb not in ARITY:
        raise ValueError(f"Unknown operation: '{parts[0]}'")
    if len(parts) - 1 != ARITY[verb]:
        raise ValueError(f"Operation '{verb}' needs {ARITY[verb]} arguments, got: '{text}'")
    try:
        args = tuple(int(x) for x in parts[1:])
    except ValueError:
        raise ValueError(f"Non-integer argument in operation: '{text}'") from None
    return verb, args


def apply_operations(forest: DisjointSet, operations: List[str],
                     mode: str = "compressed") -> Tuple[DisjointSet, List[Optional[int]]]:
    """Run a list of operations on a copy of the forest.

    Parameters
    ----------
    forest: initial forest, it is not modified.
    operations: operation strings, see `parse_operation`.
    mode: 'naive' uses find and the copying union, 'compressed' uses
        compressed_find and compressed_union on a single working copy.

    Returns
    -------
    forest: the forest after all operations.
    results: the root found by each 'find', None for each 'union'.
    """
    if mode not in MODES:
        raise ValueError(f"Invalid mode: {mode}")

    parsed = [parse_operation(op) for op in operations]
    current = forest.copy()
    results = []
    for verb, args in parsed:
        if verb == "find":
            if mode == "naive":
                results.append(current.find(*args))
            else:
                results.append(current.compressed_find(*args))
        else:
            if mode == "naive":
                current = current.union(*args)
            else:
                current.compressed_union(*args)
            results.append(None)
    return current, results
