from .heap import BinomialHeap, EmptyHeapError, heap_union, heap_view
from .sort import heap_sort, is_sorted
from .tree import BinomialNode, BinomialTree, merge_two
from .version import __version__
