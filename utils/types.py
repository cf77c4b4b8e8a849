from dataclasses import dataclass, field
from typing import Dict, Union, TypeAlias

BITS_PER_SYMBOL = 8

Symbol: TypeAlias = str
FrequencyTable: TypeAlias = Dict[Symbol, int]
CodeTable: TypeAlias = Dict[Symbol, str]


class EmptyInputError(ValueError):
    """Raised when a Huffman tree is requested for an input without symbols."""


class UnknownSymbolError(KeyError):
    """Raised when a symbol has no code in the code table."""


@dataclass(frozen=True)
class HuffmanLeaf:
    symbol: Symbol
    freq: int


@dataclass(frozen=True)
class HuffmanInternal:
    freq: int
    left: 'HuffmanNode'
    right: 'HuffmanNode'


HuffmanNode: TypeAlias = Union[HuffmanLeaf, HuffmanInternal]


@dataclass(frozen=True)
class HuffmanCoding:
    frequencies: FrequencyTable
    tree: HuffmanNode
    codes: CodeTable

    @property
    def symbols_count(self) -> int:
        return sum(self.frequencies.values())


@dataclass
class CompressedText:
    bits: str
    original_bit_size: int
    compressed_bit_size: int
    code_lengths: Dict[Symbol, int] = field(default_factory=dict)

    @property
    def bits_per_symbol(self) -> float:
        symbols = self.original_bit_size // BITS_PER_SYMBOL
        if symbols == 0:
            return 0.0
        return self.compressed_bit_size / symbols
