import io
import struct
from typing import BinaryIO, Tuple

from errors import StructuralError, TruncatedStreamError
from huffman import ALPHABET_SIZE, HuffmanTree, build_tree_from_stats, iter_leaves

# Container (little-endian):
# counts(u32 x 256, index = byte value)
# original_length(u32)
# payload: codeword bits MSB-first, last byte zero-padded
TABLE_FMT = f"<{ALPHABET_SIZE}I"
TABLE_SIZE = struct.calcsize(TABLE_FMT)   # 1024
LEN_FMT = "<I"
LEN_SIZE = struct.calcsize(LEN_FMT)       # 4
HEADER_SIZE = TABLE_SIZE + LEN_SIZE
U32_MAX = 0xFFFFFFFF

def serialize_tree(tree: HuffmanTree) -> bytes:
    """
    Frequency table for tree: leaf counts at their byte value, zeros elsewhere.
    The tree shape itself is not stored.
    """
    counts = [0] * ALPHABET_SIZE
    for leaf in iter_leaves(tree):
        if not (0 <= leaf.count <= U32_MAX):
            raise ValueError(f"count for symbol {leaf.symbol} out of u32 range")
        counts[leaf.symbol] = leaf.count
    return struct.pack(TABLE_FMT, *counts)

def deserialize_tree(data: bytes) -> HuffmanTree:
    if len(data) != TABLE_SIZE:
        raise ValueError(f"Frequency table must be {TABLE_SIZE} bytes, got {len(data)}")
    return build_tree_from_stats(struct.unpack(TABLE_FMT, data))

def write_container(f: BinaryIO, tree: HuffmanTree, original_length: int, payload: bytes):
    if not (0 <= original_length <= U32_MAX):
        raise ValueError("original length out of u32 range")
    f.write(serialize_tree(tree))
    f.write(struct.pack(LEN_FMT, original_length))
    f.write(payload)

def read_container(f: BinaryIO) -> Tuple[HuffmanTree, int, bytes]:
    header = f.read(HEADER_SIZE)
    if len(header) != HEADER_SIZE:
        raise TruncatedStreamError("Malformed stream: header too short")
    tree = deserialize_tree(header[:TABLE_SIZE])
    (original_length,) = struct.unpack(LEN_FMT, header[TABLE_SIZE:])
    if tree.count != original_length:
        raise StructuralError(
            f"Malformed stream: table counts sum to {tree.count}, header says {original_length}"
        )
    return tree, original_length, f.read()

def pack_container(tree: HuffmanTree, original_length: int, payload: bytes) -> bytes:
    buf = io.BytesIO()
    write_container(buf, tree, original_length, payload)
    return buf.getvalue()

def unpack_container(data: bytes) -> Tuple[HuffmanTree, int, bytes]:
    return read_container(io.BytesIO(data))
