from .encoder import Encoder
from .implementation.huffman_text_encoder import HuffmanTextEncoder
