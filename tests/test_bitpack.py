import pytest

from bitpack import BitReader, BitWriter, pack_bits, unpack_bits
from errors import HuffmanError, TruncatedStreamError


@pytest.mark.parametrize("byte, bits", [
	(0, [0, 0, 0, 0, 0, 0, 0, 0]),
	(1, [0, 0, 0, 0, 0, 0, 0, 1]),
	(32, [0, 0, 1, 0, 0, 0, 0, 0]),
	(68, [0, 1, 0, 0, 0, 1, 0, 0]),
])
def test_unpack_msb_first(byte, bits):
	assert unpack_bits(bytes([byte])) == bits


def test_pack_full_byte():
	assert pack_bits([0, 1, 0, 0, 0, 1, 0, 0]) == bytes([68])


def test_pack_pads_low_bits_with_zero():
	assert pack_bits([1, 0, 1]) == bytes([0b10100000])
	assert pack_bits([1] * 9) == bytes([0xFF, 0x80])


def test_pack_nothing():
	assert pack_bits([]) == b""


def test_writer_accepts_bools():
	bw = BitWriter()
	bw.write_bit(True)
	bw.write_bits([False, True])
	assert bw.finish() == bytes([0b10100000])


def test_reader_runs_out():
	br = BitReader(b"\x80")
	assert br.read_bit() == 1
	for _ in range(7):
		assert br.read_bit() == 0
	with pytest.raises(TruncatedStreamError):
		br.read_bit()


def test_truncated_is_eof_and_codec_error():
	with pytest.raises(EOFError):
		BitReader(b"").read_bit()
	with pytest.raises(HuffmanError):
		BitReader(b"").read_bit()


def test_reader_iterates_all_bits():
	assert list(BitReader(b"\xA5\x01")) == [1, 0, 1, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1]
