# filename: huffman_core.py

import logging
from collections import Counter

from huffman_errors import EmptyInputError

logger = logging.getLogger(__name__)


class HuffmanNode:
    def __init__(self, char, freq, left=None, right=None):
        # char is None for internal nodes
        self.char = char
        self.freq = freq
        self.left = left
        self.right = right

    def __lt__(self, other):
        return self.freq < other.freq

    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode(char={self.char!r}, freq={self.freq})"
        return f"HuffmanNode(freq={self.freq}, left={self.left!r}, right={self.right!r})"


def count_frequencies(data):
    """Occurrence count of every byte value present in ``data``."""
    return Counter(data)


class PriorityQueue:
    """Array-backed binary min-heap of HuffmanNode, ordered by frequency.

    The backing list has a fixed capacity that doubles when an insert finds
    it full. Equal frequencies are ordered only by heap mechanics.
    """

    def __init__(self, capacity=16):
        self.capacity = max(1, capacity)
        self.nodes = [None] * self.capacity
        self.len = 0

    def __len__(self):
        return self.len

    def insert(self, node):
        if self.len == self.capacity:
            self._grow()
        self.nodes[self.len] = node
        self.len += 1
        self._bubble_up(self.len - 1)

    def extract_min(self):
        if self.len == 0:
            return None

        root = self.nodes[0]
        self.len -= 1
        self.nodes[0] = self.nodes[self.len]
        self.nodes[self.len] = None

        if self.len > 0:
            self._bubble_down(0)
        return root

    def _grow(self):
        new_capacity = self.capacity * 2
        self.nodes.extend([None] * (new_capacity - self.capacity))
        self.capacity = new_capacity

    def _bubble_up(self, index):
        nodes = self.nodes
        while index > 0:
            parent = (index - 1) // 2
            if not nodes[index] < nodes[parent]:
                break
            nodes[parent], nodes[index] = nodes[index], nodes[parent]
            index = parent

    def _bubble_down(self, index):
        nodes = self.nodes
        while True:
            smallest = index
            # children of i live at 2i+1 and 2i+2
            left = 2 * index + 1
            right = left + 1

            if left < self.len and nodes[left] < nodes[smallest]:
                smallest = left
            if right < self.len and nodes[right] < nodes[smallest]:
                smallest = right
            if smallest == index:
                return

            nodes[index], nodes[smallest] = nodes[smallest], nodes[index]
            index = smallest


class HuffmanLogic:
    def build_tree(self, freqs):
        if not freqs:
            raise EmptyInputError()

        priority_queue = PriorityQueue(len(freqs))
        # Ascending byte order keeps equal-frequency ties reproducible
        for char in sorted(freqs):
            priority_queue.insert(HuffmanNode(char, freqs[char]))

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            left = priority_queue.extract_min()
            right = priority_queue.extract_min()
            priority_queue.insert(HuffmanNode(None, left.freq + right.freq, left, right))

        root = priority_queue.extract_min()
        logger.debug("built Huffman tree over %d symbols, weight %d", len(freqs), root.freq)
        return root

    def build_tree_from_data(self, data):
        return self.build_tree(count_frequencies(data))

    def generate_codes(self, node, current_code="", codes=None):
        if codes is None:
            codes = {}
            if node.is_leaf():
                # A lone leaf still needs one bit per symbol
                codes[node.char] = "0"
                return codes
        if node.is_leaf():
            codes[node.char] = current_code
            return codes
        self.generate_codes(node.left, current_code + "0", codes)
        self.generate_codes(node.right, current_code + "1", codes)
        return codes


def format_tree(root):
    """Render the tree as indented text, one node per line."""
    lines = []

    def visit(node, depth, prefix):
        pad = " " * (depth * 2)
        if node.is_leaf():
            lines.append(f"{pad}{prefix}Leaf: ({_label(node)}:{node.freq})")
            return
        lines.append(f"{pad}{prefix}Internal: ({node.freq})")
        visit(node.left, depth + 1, "Left: ")
        visit(node.right, depth + 1, "Right: ")
        lines.append(
            f"{pad}  Merged: ({_label(node.left)}:{node.left.freq}) + "
            f"({_label(node.right)}:{node.right.freq}) = ({node.freq})"
        )

    visit(root, 0, "")
    return "\n".join(lines) + "\n"


def _label(node):
    if node.char is None:
        return "*"
    if 0x21 <= node.char < 0x7F:
        return chr(node.char)
    return f"0x{node.char:02x}"
