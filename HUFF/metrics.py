from typing import Sequence

import numpy as np

from huffman import HuffmanTree, build_codebook, iter_leaves, symbol_stats

def entropy_bits(data: Sequence[int]) -> float:
    """Shannon entropy of the byte distribution, in bits per symbol."""
    counts = symbol_stats(data)
    total = counts.sum()
    if total == 0:
        return 0.0
    p = counts[counts > 0].astype(np.float64) / float(total)
    return float(-(p * np.log2(p)).sum())

def mean_code_length(tree: HuffmanTree) -> float:
    """Frequency-weighted codeword length, in bits per symbol."""
    if tree.count == 0:
        return 0.0
    code = build_codebook(tree)
    total_bits = sum(leaf.count * len(code[leaf.symbol]) for leaf in iter_leaves(tree))
    return total_bits / float(tree.count)

def compression_ratio(original_size: int, compressed_size: int) -> float:
    """compressed / original; below 1.0 means the output is smaller."""
    if original_size == 0:
        return float("inf")
    return compressed_size / float(original_size)
