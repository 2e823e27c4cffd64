from __future__ import annotations

import logging
from typing import Iterable, Optional

from .tree import BinomialTree, merge_two

logger = logging.getLogger(__name__)


class EmptyHeapError(IndexError):
    pass


def _add_rank(a: Optional[BinomialTree], b: Optional[BinomialTree],
              carry: Optional[BinomialTree]):
    """
    One digit of the binary addition over ranks.

    Args:
        a: tree of this rank in the first heap
        b: tree of this rank in the second heap
        carry: tree of this rank carried from the rank below

    Returns:
        (slot, carry): tree kept at this rank and tree carried to the next
    """
    if a is None:
        a, b = b, None
    if carry is None:
        if b is None:
            return a, None
        return None, merge_two(a, b)
    if a is None:
        return carry, None
    if b is None:
        return None, merge_two(carry, a)
    return carry, merge_two(a, b)


class BinomialHeap():
    """
    Binomial Heap

    Attributes:
        key_number: number of keys in the heap
        trees: slot i holds the tree of rank i or None, occupied slots
            follow the bits of key_number

    Methods:
        insert(key): insert a key into the heap
        extract_min(): remove and return the minimum key
        union(other): move all keys of other into the heap
    """

    def __init__(self, keys: Iterable | None = None):
        self.key_number = 0
        self.trees: list[Optional[BinomialTree]] = []
        if keys is not None:
            for key in keys:
                self.insert(key)

    @classmethod
    def empty(cls) -> BinomialHeap:
        return cls()

    @classmethod
    def singleton(cls, tree: BinomialTree) -> BinomialHeap:
        heap = cls()
        heap.trees = [None] * tree.rank + [tree]
        heap.key_number = tree.size
        return heap

    @classmethod
    def from_forest(cls, trees: list[BinomialTree]) -> BinomialHeap:
        """
        Build a heap from trees of rank 0, 1, ..., k - 1.
        """
        heap = cls()
        for i, tree in enumerate(trees):
            assert tree.rank == i, f"tree of rank {tree.rank} at slot {i}."
        heap.trees = list(trees)
        heap.key_number = (1 << len(trees)) - 1
        return heap

    @classmethod
    def from_iterable(cls, keys: Iterable) -> BinomialHeap:
        return cls(keys)

    def size(self) -> int:
        return self.key_number

    def __len__(self):
        return self.key_number

    def __bool__(self):
        return self.key_number > 0

    def __iter__(self):
        for tree in self.trees:
            if tree is not None:
                yield from tree.nodes()

    def ranks(self) -> list[int]:
        return [i for i, tree in enumerate(self.trees) if tree is not None]

    def _clear(self):
        self.trees = []
        self.key_number = 0

    def _trim(self):
        while self.trees and self.trees[-1] is None:
            self.trees.pop()

    def union(self, other: BinomialHeap | None) -> BinomialHeap:
        if other is self:
            raise ValueError("Can not union a heap with itself.")
        if other is None or other.key_number == 0:
            return self
        if self.key_number == 0:
            self.trees, self.key_number = other.trees, other.key_number
            other._clear()
            return self

        logger.debug('union heaps of size %d and %d', self.key_number,
                     other.key_number)
        ours, theirs = self.trees, other.trees
        if len(theirs) > len(ours):
            ours, theirs = theirs, ours

        trees = []
        carry = None
        for rank, a in enumerate(ours):
            b = theirs[rank] if rank < len(theirs) else None
            if b is None and carry is None:
                trees.append(a)
                continue
            slot, carry = _add_rank(a, b, carry)
            trees.append(slot)
        if carry is not None:
            trees.append(carry)

        self.trees = trees
        self.key_number += other.key_number
        other._clear()
        return self

    def insert(self, key) -> None:
        self.union(BinomialHeap.singleton(BinomialTree(key)))

    def _min_index(self) -> int:
        index = -1
        for i, tree in enumerate(self.trees):
            if tree is None:
                continue
            if index == -1 or tree.key < self.trees[index].key:
                index = i
        return index

    def peek_min(self):
        if self.key_number == 0:
            raise EmptyHeapError("Cannot peek empty heap.")
        return self.trees[self._min_index()].key

    def extract_min(self):
        if self.key_number == 0:
            raise EmptyHeapError("Cannot extract from empty heap.")

        index = self._min_index()
        tree = self.trees[index]
        key = tree.key
        self.trees[index] = None
        self.key_number -= tree.size
        self._trim()

        children = BinomialHeap.from_forest(tree.decompose_into_children())
        logger.debug('extract %r from rank %d', key, index)
        self.union(children)
        return key

    def check(self) -> bool:
        """Return True iff every tree and the slot bookkeeping are valid."""
        if self.trees and self.trees[-1] is None:
            return False
        total = 0
        for i, tree in enumerate(self.trees):
            if tree is None:
                continue
            if tree.rank != i or not tree.check():
                return False
            total += tree.size
        return total == self.key_number

    def to_debug_string(self) -> str:
        lines = [f'Heap size: {self.key_number}']
        for tree in self.trees:
            if tree is not None:
                lines.append(tree.to_debug_string())
        return '\n'.join(lines)

    def __repr__(self):
        return f'BinomialHeap(size={self.key_number}, ranks={self.ranks()})'


def heap_union(a: BinomialHeap | None, b: BinomialHeap | None):
    """
    Union two Binomial Heaps
    """
    if a is None:
        return b
    if b is None:
        return a
    return a.union(b)


def heap_view(heap: BinomialHeap):
    """
    Render the forest as a treelib.Tree under a synthetic root.

    Call `.show()` on the result to print it.
    """
    from treelib import Tree

    ret = Tree()
    ret.create_node(tag=f'heap({heap.key_number})', identifier='root')

    def add(node, parent):
        ret.create_node(tag=repr(node), identifier=id(node), parent=parent)
        for child in node.children:
            add(child, id(node))

    for tree in heap.trees:
        if tree is not None:
            add(tree.node, 'root')
    return ret
