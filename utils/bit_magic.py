from typing import Sequence
import numpy as np
from collections import Counter
from .types import Symbol, FrequencyTable, CodeTable, UnknownSymbolError, BITS_PER_SYMBOL


def calculate_entropy(data: Sequence[Symbol]) -> float:
    frequencies = Counter(data)
    return float(-sum(map(lambda f: f / len(data) * np.log2(f / len(data)), frequencies.values())))


def original_bit_size(data: Sequence[Symbol]) -> int:
    return len(data) * BITS_PER_SYMBOL


def compressed_bit_size(data: Sequence[Symbol], codes: CodeTable) -> int:
    bits = 0
    for symbol in data:
        if symbol not in codes:
            raise UnknownSymbolError(symbol)
        bits += len(codes[symbol])
    return bits


def average_code_length(frequencies: FrequencyTable, codes: CodeTable) -> float:
    total = sum(frequencies.values())
    if total == 0:
        return 0.0
    return sum(freq * len(codes[symbol]) for symbol, freq in frequencies.items()) / total


def compression_ratio(original_bits: int, compressed_bits: int) -> float:
    if original_bits == 0:
        return 0.0
    return compressed_bits / original_bits
