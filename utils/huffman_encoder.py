import heapq
import itertools
from collections import Counter
from typing import Iterable, Tuple

from .types import (
    Symbol, FrequencyTable, CodeTable, HuffmanNode, HuffmanLeaf, HuffmanInternal, EmptyInputError
)


def count_frequencies(data: Iterable[Symbol]) -> FrequencyTable:
    # Keys keep the order of first appearance in the data
    return dict(Counter(data))


def build_huffman_tree(frequencies: FrequencyTable) -> HuffmanNode:
    """
    Builds a Huffman tree by repeatedly merging the two least frequent nodes.

    Heap entries are (freq, sequence, node). The sequence number grows with every push,
    so among nodes of equal frequency the one pushed earlier is popped first: leaves in
    the order of the frequency table, merged nodes after everything pushed before them.

    Parameters:
        frequencies (dict): Dictionary mapping symbols to their frequencies.

    Returns:
        HuffmanNode: Root of the tree. A single leaf when there is only one symbol.
    """
    if not frequencies:
        raise EmptyInputError("Cannot build a Huffman tree without any symbols.")

    sequence = itertools.count()
    heap = [(freq, next(sequence), HuffmanLeaf(symbol, freq)) for symbol, freq in frequencies.items()]
    heapq.heapify(heap)

    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        merged = HuffmanInternal(left_freq + right_freq, left, right)
        heapq.heappush(heap, (merged.freq, next(sequence), merged))

    return heap[0][2]


def build_huffman_codes(node: HuffmanNode) -> CodeTable:
    codes: CodeTable = {}

    def generate_codes(node, prefix):
        if isinstance(node, HuffmanLeaf):
            # A lone leaf still gets a one bit code
            codes[node.symbol] = prefix or "0"
            return
        generate_codes(node.left, prefix + "0")
        generate_codes(node.right, prefix + "1")

    generate_codes(node, "")
    return codes


def calculate_huffman_codes(data: Iterable[Symbol]) -> Tuple[FrequencyTable, HuffmanNode, CodeTable]:
    # Calculate frequencies
    frequencies = count_frequencies(data)

    # Build Huffman Tree
    root = build_huffman_tree(frequencies)

    # Build Huffman Codes
    huffman_codes = build_huffman_codes(root)

    return frequencies, root, huffman_codes
