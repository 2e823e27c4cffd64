import json
from pathlib import Path

DEFAULT_CASES = [
    (10, 10),
    (100, 100),
    (100000, 1),
    (100000, 100),
    (100000, 1000),
    (100000, 1000000000),
]


def _case(item, index):
    if not isinstance(item, (list, tuple)) or len(item) != 2:
        raise TypeError(
            f"Case cases[{index}] error, {item!r} is not a pair [n, max_elem]."
        )
    n, max_elem = item
    if not isinstance(n, int) or not isinstance(max_elem, int):
        raise TypeError(
            f"Case cases[{index}] error, {item!r} should hold two integers.")
    if n < 0 or max_elem < 0:
        raise ValueError(
            f"Case cases[{index}] error, {item!r} should not be negative.")
    return n, max_elem


def parse_cases(dct) -> list[tuple[int, int]]:
    if isinstance(dct, dict):
        try:
            dct = dct['cases']
        except KeyError:
            raise KeyError("Query cases error, key 'cases' not found.")
    if not isinstance(dct, list):
        raise TypeError(f"Query cases error, type is {type(dct)}, not list.")
    return [_case(item, i) for i, item in enumerate(dct)]


def load_cases(path) -> list[tuple[int, int]]:
    """
    Load self-test cases from a json file.

    Args:
        path: file holding {"cases": [[n, max_elem], ...]} or a bare list

    Returns:
        list of (n, max_elem)
    """
    with Path(path).open('r') as f:
        dct = json.load(f)
    return parse_cases(dct)
