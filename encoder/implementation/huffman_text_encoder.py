from typing import Optional, TextIO
from tqdm import tqdm
from utils.types import *
from utils.huffman_encoder import calculate_huffman_codes
from utils.bit_magic import calculate_entropy, original_bit_size, average_code_length, compression_ratio
from ..encoder import Encoder


class HuffmanTextEncoder(Encoder):
    def __init__(self, verbose=False, output: Optional[TextIO] = None):
        self.verbose = verbose
        # Verbose statistics go to sys.stdout when no output stream is given
        self.output = output
        self.coding: Optional[HuffmanCoding] = None

    def encode(self, text: str) -> CompressedText:
        """
        Builds the Huffman coding of the text and encodes the text with it.

        The coding is kept in self.coding for the consumers that render the tree and tables.

        Raises:
            EmptyInputError: If the text is empty.
        """
        frequencies, tree, codes = calculate_huffman_codes(text)
        self.coding = HuffmanCoding(frequencies, tree, codes)

        encoded_symbols = []
        for symbol in tqdm(text, disable=not self.verbose):
            encoded_symbols.append(codes[symbol])
        bits = ''.join(encoded_symbols)

        original_bits = original_bit_size(text)

        if self.verbose:
            print("HuffmanTextEncoder verbose statistics:", file=self.output)
            print(f"- Distinct symbols: {len(frequencies)}", file=self.output)
            print(f"- Entropy: {calculate_entropy(text):.3f}", file=self.output)
            print(f"- Average code bit length: {average_code_length(frequencies, codes):.3f}", file=self.output)
            print(f"- Original (in bits): {original_bits}", file=self.output)
            print(f"- Compressed (in bits): {len(bits)}", file=self.output)
            print(f"- Compression ratio: {compression_ratio(original_bits, len(bits)):.3f}", file=self.output)

        return CompressedText(bits, original_bits, len(bits), {s: len(c) for s, c in codes.items()})
