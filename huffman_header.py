# filename: huffman_header.py
#
# Tree header layout, pre-order:
#   internal node -> 0, left subtree, right subtree
#   leaf          -> 1, 8-bit byte value (MSB first)
# There is no length prefix; the reader stops when the last subtree closes.

import logging

from huffman_bits import BitWriter
from huffman_core import HuffmanNode
from huffman_errors import CorruptTreeError, TruncatedStreamError

logger = logging.getLogger(__name__)

MAX_LEAVES = 256


def serialize_tree(root, writer):
    if root.is_leaf():
        writer.write_bit(1)
        writer.write_byte(root.char)
        return
    writer.write_bit(0)
    serialize_tree(root.left, writer)
    serialize_tree(root.right, writer)


def tree_to_bits(root):
    """The header of ``root`` as a '0'/'1' string."""
    writer = BitWriter()
    serialize_tree(root, writer)
    data = writer.finish()
    bits = "".join(f"{byte:08b}" for byte in data)
    return bits[:writer.bit_length]


class _TreeReader:
    def __init__(self, reader):
        self.reader = reader
        self.seen = set()
        self.internal = 0

    def read_node(self):
        if self.reader.read_bit():
            char = self.reader.read_byte()
            if char in self.seen:
                raise CorruptTreeError(f"leaf 0x{char:02x} appears twice in the tree header")
            self.seen.add(char)
            return HuffmanNode(char, 0)

        # n leaves never need more than n - 1 internal nodes
        self.internal += 1
        if self.internal >= MAX_LEAVES:
            raise CorruptTreeError(f"tree header has more than {MAX_LEAVES - 1} internal nodes")
        left = self.read_node()
        right = self.read_node()
        return HuffmanNode(None, 0, left, right)


def deserialize_tree(reader):
    """Rebuild the tree written by serialize_tree, leaving ``reader`` on the first payload bit.

    Frequencies are not stored in the header, so every node comes back with
    ``freq == 0``.
    """
    tree_reader = _TreeReader(reader)
    try:
        root = tree_reader.read_node()
    except TruncatedStreamError as err:
        raise CorruptTreeError(f"tree header is incomplete: {err}") from err
    logger.debug("read tree header: %d leaves, %d bits", len(tree_reader.seen), reader.position)
    return root
