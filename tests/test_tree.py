import pytest

from binheap.tree import BinomialTree, merge_two


def build(rank, start=0):
    trees = [BinomialTree(k) for k in range(start, start + (1 << rank))]
    while len(trees) > 1:
        trees = [merge_two(a, b) for a, b in zip(trees[::2], trees[1::2])]
    return trees[0]


def test_new():
    t = BinomialTree.new(7)
    assert t.rank == 0
    assert t.size == 1
    assert t.root_value() == 7
    assert t.node.children == []
    assert t.check()


def test_merge_root():
    a, b = BinomialTree(1), BinomialTree(2)
    a.merge_root(b)
    assert a.rank == 1
    assert a.size == 2
    assert b.node is None
    assert [c.key for c in a.node.children] == [2]
    assert a.check()


def test_merge_root_rank_mismatch():
    a = merge_two(BinomialTree(1), BinomialTree(2))
    with pytest.raises(AssertionError):
        a.merge_root(BinomialTree(3))


def test_merge_two():
    a, b = BinomialTree(5), BinomialTree(3)
    t = merge_two(a, b)
    assert t is b
    assert t.key == 3
    assert list(t.nodes()) == [3, 5]

    a, b = BinomialTree(4), BinomialTree(4)
    assert BinomialTree.merge_two(a, b) is a


def test_shape():
    for rank in range(6):
        t = build(rank)
        assert t.rank == rank
        assert t.size == 2**rank
        assert sorted(t.nodes()) == list(range(2**rank))
        assert t.key == 0
        assert t.check()
        for i, child in enumerate(t.node.children):
            assert len(child.children) == i


def test_decompose_into_children():
    t = build(3, start=10)
    children = t.decompose_into_children()
    assert t.node is None
    assert [c.rank for c in children] == [0, 1, 2]
    assert all(c.check() for c in children)
    keys = sorted(k for c in children for k in c.nodes())
    assert keys == list(range(11, 18))


def test_check_detects_order_violation():
    t = build(2)
    t.node.children[1].key = -1
    assert not t.check()


def test_debug_string():
    t = merge_two(BinomialTree(1), BinomialTree(2))
    assert t.to_debug_string() == 'Tree rank: 1\n1 2'
