# filename: huffman_cli.py
"""
Command line front end for the Huffman codec.

Run with:
    python -m huffman_cli encode --input book.txt --output book.txt.huff
    python -m huffman_cli decode --input book.txt.huff --output book.txt
"""
import logging
import os
import sys

from huffman_core import format_tree
from huffman_errors import FileTooLargeError, HuffmanError
from huffman_service import HuffmanService

logger = logging.getLogger(__name__)

MAX_INPUT_SIZE = 64 * 1024 * 1024
DEFAULT_SUFFIX = ".huff"


def read_whole_input(path, max_size=MAX_INPUT_SIZE):
    """Read all of ``path`` into memory, refusing files over ``max_size`` bytes."""
    size = os.path.getsize(path)
    if size > max_size:
        raise FileTooLargeError(path, size, max_size)
    with open(path, "rb") as f:
        return f.read()


def write_output(path, data):
    with open(path, "wb") as f:
        f.write(data)


def default_output_path(input_path, mode):
    if mode == "encode":
        return input_path + DEFAULT_SUFFIX
    if input_path.endswith(DEFAULT_SUFFIX) and len(input_path) > len(DEFAULT_SUFFIX):
        return input_path[:-len(DEFAULT_SUFFIX)]
    return input_path + ".out"


def format_statistics(original_size, encoded_size):
    lines = [
        "Byte count comparison:",
        f"Original: {original_size} bytes",
        f"Encoded:  {encoded_size} bytes",
    ]
    if encoded_size:
        lines.append(f"Compression ratio: {original_size / encoded_size:.2f}")
    return "\n".join(lines)


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(prog="huffman", description="Byte-oriented Huffman compressor")
    parser.add_argument("mode", choices=("encode", "decode"))
    parser.add_argument("--input", required=True, help="File to read")
    parser.add_argument(
        "--output",
        default=None,
        help=f"File to write (default: add or strip {DEFAULT_SUFFIX})",
    )
    parser.add_argument("--tree", default=None, help="Also write a text dump of the Huffman tree (encode only)")
    parser.add_argument("--max-size", type=int, default=MAX_INPUT_SIZE, help="Largest input accepted, in bytes")
    parser.add_argument("--quiet", action="store_true", help="Do not print statistics")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args):
    service = HuffmanService()
    output_path = args.output or default_output_path(args.input, args.mode)

    data = read_whole_input(args.input, args.max_size)
    if args.mode == "encode":
        tree = service.logic.build_tree_from_data(data)
        result = service.encode(data, tree).to_bytes()
        tree_dump = format_tree(tree) if args.tree else None
        original_size, encoded_size = len(data), len(result)
    else:
        result = service.decompress(data)
        original_size, encoded_size = len(result), len(data)

    write_output(output_path, result)
    if args.mode == "encode" and args.tree:
        with open(args.tree, "w", encoding="utf-8") as f:
            f.write(tree_dump)
    logger.info("%s: %s (%dB) -> %s (%dB)", args.mode, args.input, len(data), output_path, len(result))
    if not args.quiet:
        print(format_statistics(original_size, encoded_size))


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    try:
        run(args)
    except (HuffmanError, OSError) as e:
        logger.error("%s failed: %s", args.mode, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
