# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every failure raised by the codec."""


class EmptyInputError(HuffmanError):
    def __init__(self, message="no input bytes, cannot build a Huffman tree"):
        super().__init__(message)


class CharacterNotInCodeTableError(HuffmanError):
    def __init__(self, char):
        self.char = char
        super().__init__(f"byte 0x{char:02x} has no entry in the code table")


class CorruptTreeError(HuffmanError):
    pass


class TruncatedStreamError(HuffmanError):
    pass


class FileTooLargeError(HuffmanError):
    def __init__(self, path, size, limit):
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(f"{path} is {size} bytes, limit is {limit} bytes")
