class BinomialNode():
    __slots__ = ('key', 'children')

    def __init__(self, key=None, children=None):
        self.key = key
        self.children = [] if children is None else children

    def walk(self):
        yield self.key
        for child in self.children:
            yield from child.walk()

    def check(self, rank):
        if len(self.children) != rank:
            return False
        for i, child in enumerate(self.children):
            if child.key < self.key or not child.check(i):
                return False
        return True

    def __repr__(self):
        return f'{self.key}'


class BinomialTree():
    """
    Binomial tree

    A tree of rank r has exactly r children, the i-th of which is a
    binomial tree of rank i, so it holds 2 ** r keys in total. Every key
    is not less than the key of its parent.

    Attributes:
        node: the root node, None once the tree has been absorbed
        rank: number of children of the root

    Methods:
        merge_root(other): make the root of other the last child of the root
        decompose_into_children(): split the children into separate trees
    """
    __slots__ = ('node', 'rank')

    def __init__(self, key=None, rank=0, node=None):
        if node is None:
            node = BinomialNode(key)
        self.node, self.rank = node, rank

    @classmethod
    def new(cls, key):
        return cls(key)

    @property
    def key(self):
        return self.node.key

    @property
    def size(self) -> int:
        return 1 << self.rank

    def root_value(self):
        return self.node.key

    def merge_root(self, other: 'BinomialTree') -> None:
        assert self.rank == other.rank, (
            f"can not merge tree of rank {other.rank} into rank {self.rank}.")
        assert other is not self and other.node is not None
        self.node.children.append(other.node)
        self.rank += 1
        other.node = None

    def decompose_into_children(self) -> list['BinomialTree']:
        ret = [
            BinomialTree(rank=i, node=child)
            for i, child in enumerate(self.node.children)
        ]
        self.node = None
        return ret

    @staticmethod
    def merge_two(a: 'BinomialTree', b: 'BinomialTree') -> 'BinomialTree':
        return merge_two(a, b)

    def nodes(self):
        return self.node.walk()

    def check(self) -> bool:
        return self.node is not None and self.node.check(self.rank)

    def to_debug_string(self) -> str:
        keys = ' '.join(str(key) for key in self.nodes())
        return f'Tree rank: {self.rank}\n{keys}'

    def __repr__(self):
        return f'BinomialTree({self.key!r}, rank={self.rank})'


def merge_two(a: BinomialTree, b: BinomialTree) -> BinomialTree:
    """
    Merge two trees of the same rank

    The tree with the smaller root becomes the parent, the left one wins
    on equal keys.

    Args:
        a: left tree, consumed unless it becomes the parent
        b: right tree, consumed unless it becomes the parent

    Returns:
        the tree of rank + 1 holding both
    """
    if b.key < a.key:
        a, b = b, a
    a.merge_root(b)
    return a
