from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, Optional, Sequence, Tuple

import numpy as np

ALPHABET_SIZE = 256

Code = Tuple[int, ...]  # codeword bits, root-to-leaf

@dataclass
class HuffmanTree:
    count: int = 0
    elem: FrozenSet[int] = frozenset()
    zero: Optional["HuffmanTree"] = None
    one: Optional["HuffmanTree"] = None

    def is_leaf(self) -> bool:
        return self.zero is None and self.one is None

    def is_empty(self) -> bool:
        return self.count == 0 and not self.elem

    @property
    def symbol(self) -> int:
        """Byte value held by a leaf."""
        if not self.is_leaf() or len(self.elem) != 1:
            raise ValueError("only a leaf holds a single symbol")
        return next(iter(self.elem))

def symbol_stats(data: Sequence[int]) -> np.ndarray:
    """
    Count occurrences of every byte value.
    Returns int64 array of length 256, index = byte value.
    """
    buf = np.frombuffer(bytes(data), dtype=np.uint8)
    return np.bincount(buf, minlength=ALPHABET_SIZE).astype(np.int64)

def build_tree_from_stats(counts: Sequence[int]) -> HuffmanTree:
    """
    Greedy two-smallest merge over the nonzero counts.

    Candidates start in byte-value order. Every round does a stable sort by
    count (descending), pops the last two and puts the merged node at the
    front, so equal counts always resolve the same way for the same table.
    """
    counts = [int(c) for c in counts]
    if len(counts) != ALPHABET_SIZE:
        raise ValueError(f"expected {ALPHABET_SIZE} counts, got {len(counts)}")
    if any(c < 0 for c in counts):
        raise ValueError("symbol counts must be non-negative")

    nodes = [HuffmanTree(count=c, elem=frozenset((sym,)))
             for sym, c in enumerate(counts) if c > 0]
    if not nodes:
        return HuffmanTree()
    if len(nodes) == 1:
        # Edge case: only one symbol -> give it a 1-bit code
        only = nodes[0]
        return HuffmanTree(count=only.count, elem=only.elem, zero=only)

    while len(nodes) > 1:
        nodes.sort(key=lambda n: -n.count)
        a = nodes.pop()
        b = nodes.pop()
        nodes.insert(0, HuffmanTree(count=a.count + b.count, elem=a.elem | b.elem, zero=a, one=b))
    return nodes[0]

def build_tree(data: Sequence[int]) -> HuffmanTree:
    return build_tree_from_stats(symbol_stats(data))

def iter_leaves(node: HuffmanTree) -> Iterator[HuffmanTree]:
    """Leaves in zero-before-one order. The empty tree has none."""
    if node.is_leaf():
        if node.elem:
            yield node
        return
    if node.zero is not None:
        yield from iter_leaves(node.zero)
    if node.one is not None:
        yield from iter_leaves(node.one)

def build_codebook(node: HuffmanTree, prefix: Code = (), code: Optional[Dict[int, Code]] = None) -> Dict[int, Code]:
    if code is None:
        code = {}
    if node.is_leaf():
        if node.elem:
            code[node.symbol] = prefix
        return code
    if node.zero is not None:
        build_codebook(node.zero, prefix + (0,), code)
    if node.one is not None:
        build_codebook(node.one, prefix + (1,), code)
    return code

def code_lengths(node: HuffmanTree) -> Dict[int, int]:
    return {sym: len(bits) for sym, bits in build_codebook(node).items()}
