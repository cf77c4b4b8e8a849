import argparse
import sys

from reader.reader import Reader
from .menu import Menu


def main(argv=None):
    parser = argparse.ArgumentParser(description="Huffman coding of one line of text")
    parser.add_argument(
        "--text",
        type=str,
        default=None,
        help="Text to compress (default: read one line from standard input)"
    )
    parser.add_argument("--verbose", action="store_true", help="Print coding statistics")

    args = parser.parse_args(argv)

    if args.text is None:
        text = Reader.read_from_stream(sys.stdin, prompt="Enter your text: ", output=sys.stdout)
    else:
        text = args.text

    Menu(text, sys.stdin, sys.stdout, verbose=args.verbose).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
