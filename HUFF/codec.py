from typing import Dict, Iterable, List, Sequence, Tuple

from bitpack import BitReader, pack_bits
from bitstream import pack_container, unpack_container
from errors import StructuralError, TruncatedStreamError, UnknownSymbolError
from huffman import HuffmanTree, build_tree

def _walk_to_symbol(tree: HuffmanTree, symbol: int) -> List[int]:
    """Root-to-leaf bits for symbol, chosen by elem membership at each node."""
    if symbol not in tree.elem:
        raise UnknownSymbolError(f"Symbol {symbol} is not in the tree")
    if tree.is_leaf():
        raise StructuralError(f"Tree root is a bare leaf, symbol {symbol} has no codeword")
    path = []
    node = tree
    while not node.is_leaf():
        if node.zero is not None and symbol in node.zero.elem:
            path.append(0)
            node = node.zero
        elif node.one is not None and symbol in node.one.elem:
            path.append(1)
            node = node.one
        else:
            raise UnknownSymbolError(f"Symbol {symbol} is not under any child of its parent")
    return path

def encode(tree: HuffmanTree, data: Sequence[int]) -> List[int]:
    bits: List[int] = []
    paths: Dict[int, List[int]] = {}
    for byte in data:
        path = paths.get(byte)
        if path is None:
            path = paths[byte] = _walk_to_symbol(tree, byte)
        bits.extend(path)
    return bits

def decode(tree: HuffmanTree, bits: Iterable[int], symbol_count: int) -> bytes:
    """
    Walk the tree bit by bit, emitting a byte per leaf reached.
    Stops after symbol_count bytes; trailing bits (padding) are never read.
    """
    if symbol_count < 0:
        raise ValueError("symbol_count must be non-negative")
    out = bytearray()
    it = iter(bits)
    node = tree
    while len(out) < symbol_count:
        bit = next(it, None)
        if bit is None:
            raise TruncatedStreamError(
                f"Bitstream exhausted after {len(out)} of {symbol_count} symbols"
            )
        child = node.one if bit else node.zero
        if child is None:
            raise StructuralError("Invalid Huffman code (corrupt stream or mismatched tree)")
        if child.is_leaf():
            out.append(child.symbol)
            node = tree
        else:
            node = child
    return bytes(out)

def compress(data: Sequence[int]) -> Tuple[bytes, HuffmanTree]:
    tree = build_tree(data)
    return pack_bits(encode(tree, data)), tree

def decompress(compressed: bytes, tree: HuffmanTree, original_length: int) -> bytes:
    return decode(tree, BitReader(compressed), original_length)

def compress_bytes(data: Sequence[int]) -> bytes:
    """Whole container: frequency table, original length, payload."""
    payload, tree = compress(data)
    return pack_container(tree, len(data), payload)

def decompress_bytes(container: bytes) -> bytes:
    tree, original_length, payload = unpack_container(container)
    return decompress(payload, tree, original_length)
