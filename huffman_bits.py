# filename: huffman_bits.py

from huffman_errors import TruncatedStreamError


class BitWriter:
    """Packs bits MSB-first into a growable byte buffer."""

    def __init__(self):
        self.data = bytearray(1)
        self.byte_index = 0
        self.bit_position = 0

    @property
    def bit_length(self):
        return self.byte_index * 8 + self.bit_position

    def write_bit(self, bit):
        if bit:
            self.data[self.byte_index] |= 1 << (7 - self.bit_position)
        self.bit_position += 1
        if self.bit_position == 8:
            self.bit_position = 0
            self.byte_index += 1
            self.data.append(0)

    def write_byte(self, value):
        for shift in range(7, -1, -1):
            self.write_bit((value >> shift) & 1)

    def write_bits(self, code):
        # code is a string of '0' / '1' characters
        for bit in code:
            self.write_bit(bit == "1")

    def finish(self):
        end = self.byte_index + 1 if self.bit_position else self.byte_index
        return bytes(self.data[:end])


class BitReader:
    """Reads bits MSB-first from a fixed byte buffer.

    ``bit_length`` limits how many bits are readable; it defaults to every
    bit of ``data``. Anything past it is padding.
    """

    def __init__(self, data, bit_length=None):
        self.data = data
        self.byte_index = 0
        self.bit_position = 0
        if bit_length is None:
            bit_length = len(data) * 8
        self.bit_length = bit_length

    @property
    def position(self):
        return self.byte_index * 8 + self.bit_position

    def at_end(self):
        return self.byte_index >= len(self.data) or self.position >= self.bit_length

    def read_bit(self):
        if self.at_end():
            raise TruncatedStreamError(f"bitstream ended after {self.position} bits")
        bit = (self.data[self.byte_index] >> (7 - self.bit_position)) & 1
        self.bit_position += 1
        if self.bit_position == 8:
            self.bit_position = 0
            self.byte_index += 1
        return bit

    def read_byte(self):
        value = 0
        for _ in range(8):
            value = (value << 1) | self.read_bit()
        return value
