# filename: huffman_service.py

import logging
from dataclasses import dataclass

from huffman_bits import BitReader, BitWriter
from huffman_core import HuffmanLogic
from huffman_errors import (
    CharacterNotInCodeTableError,
    CorruptTreeError,
    EmptyInputError,
    TruncatedStreamError,
)
from huffman_header import deserialize_tree, serialize_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodedFile:
    """Tree header plus payload, and how many bits of the last byte are used.

    ``last_byte_bit_count`` is 0 when the final byte is fully used.
    """

    data: bytes
    last_byte_bit_count: int

    @property
    def bit_length(self):
        if self.last_byte_bit_count == 0:
            return len(self.data) * 8
        return (len(self.data) - 1) * 8 + self.last_byte_bit_count

    def to_bytes(self):
        return self.data + bytes([self.last_byte_bit_count])

    @classmethod
    def from_bytes(cls, raw):
        if len(raw) < 2:
            raise TruncatedStreamError(f"encoded file is {len(raw)} bytes, need at least 2")
        count = raw[-1]
        if count > 7:
            raise TruncatedStreamError(f"trailing byte declares {count} valid bits, expected 0-7")
        return cls(bytes(raw[:-1]), count)


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def encode(self, data, tree=None):
        if not data:
            raise EmptyInputError()
        if tree is None:
            tree = self.logic.build_tree_from_data(data)
        codes = self.logic.generate_codes(tree)

        writer = BitWriter()
        serialize_tree(tree, writer)
        header_bits = writer.bit_length

        for char in data:
            code = codes.get(char)
            if code is None:
                raise CharacterNotInCodeTableError(char)
            writer.write_bits(code)

        logger.debug(
            "encoded %d bytes: %d codes, %d header bits, %d payload bits",
            len(data), len(codes), header_bits, writer.bit_length - header_bits,
        )
        return EncodedFile(writer.finish(), writer.bit_position)

    def compress(self, data):
        return self.encode(data).to_bytes()

    def decode(self, encoded):
        reader = BitReader(encoded.data, encoded.bit_length)
        root = deserialize_tree(reader)

        out = bytearray()
        if root.is_leaf():
            # single-symbol input: every payload bit is a "0" code
            while not reader.at_end():
                if reader.read_bit():
                    raise CorruptTreeError("single-leaf tree has no branch for bit 1")
                out.append(root.char)
            return bytes(out)

        node = root
        while not reader.at_end():
            node = node.right if reader.read_bit() else node.left
            if node.is_leaf():
                out.append(node.char)
                node = root

        if node is not root:
            raise TruncatedStreamError(f"payload ends inside a code after {len(out)} bytes")
        logger.debug("decoded %d bytes from %d bits", len(out), encoded.bit_length)
        return bytes(out)

    def decompress(self, raw):
        return self.decode(EncodedFile.from_bytes(raw))
