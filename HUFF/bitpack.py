from typing import Iterable, Iterator

from errors import TruncatedStreamError

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)

    def write_bit(self, bit: int):
        self._cur = (self._cur << 1) | (1 if bit else 0)
        self._nbits += 1
        if self._nbits == 8:
            self._buf.append(self._cur)
            self._cur = 0
            self._nbits = 0

    def write_bits(self, bits: Iterable[int]):
        """Write bits in the given order (first bit lands in the MSB)."""
        for bit in bits:
            self.write_bit(bit)

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    def __init__(self, data: bytes):
        self.data = data
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first

    def read_bit(self) -> int:
        if self.i >= len(self.data):
            raise TruncatedStreamError("Unexpected end of bitstream")
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return b

    def __iter__(self) -> Iterator[int]:
        while self.i < len(self.data):
            yield self.read_bit()

def pack_bits(bits: Iterable[int]) -> bytes:
    bw = BitWriter()
    bw.write_bits(bits)
    return bw.finish()

def unpack_bits(data: bytes) -> list:
    """All bits of data, MSB of each byte first (padding included)."""
    return list(BitReader(data))
