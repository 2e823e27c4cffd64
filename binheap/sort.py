import logging
from collections import Counter
from typing import Iterable, Optional, Sequence

import numpy as np

from .heap import BinomialHeap

logger = logging.getLogger(__name__)


class SortCheckError(AssertionError):

    def __init__(self, msg, before, after):
        super().__init__(msg)
        self.before = before
        self.after = after


def heap_sort(values: Sequence) -> list:
    heap = BinomialHeap(values)
    return [heap.extract_min() for _ in range(len(values))]


def is_sorted(values: Iterable) -> bool:
    it = iter(values)
    try:
        prev = next(it)
    except StopIteration:
        return True
    for x in it:
        if x < prev:
            return False
        prev = x
    return True


def gen_values(length: int,
               min_elem: int,
               max_elem: Optional[int] = None,
               seed=None) -> list[int]:
    """
    Random integers drawn uniformly from a closed range.

    Args:
        length (int): number of values
        min_elem (int): lower bound, or the bound m of [-m, m] when
            max_elem is omitted
        max_elem (int): upper bound
        seed: seed of the numpy random generator

    Returns:
        list[int]: the values
    """
    if max_elem is None:
        min_elem, max_elem = -min_elem, min_elem
    rng = np.random.default_rng(seed)
    return rng.integers(min_elem, max_elem, size=length,
                        endpoint=True).tolist()


def run_case(n: int, max_elem: int, seed=None) -> list:
    before = gen_values(n, max_elem, seed=seed)
    logger.info('sort %d values in [%d, %d]', n, -max_elem, max_elem)
    after = heap_sort(before)
    if not is_sorted(after):
        raise SortCheckError('result is not sorted', before, after)
    if Counter(after) != Counter(before):
        raise SortCheckError('result is not a permutation of the input',
                             before, after)
    return after


def selftest(cases: Iterable[tuple[int, int]], seed=None) -> int:
    count = 0
    for n, max_elem in cases:
        run_case(n, max_elem, seed=seed)
        count += 1
    logger.info('%d cases passed', count)
    return count
