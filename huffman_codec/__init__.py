"""Static two-pass Huffman coding of 16-bit symbol streams."""
from .bitstream import decode, encode, encoded_bit_length, read_header, write_header
from .codec import compress, compress_file, decompress, decompress_file, mode_for_filename
from .codes import generate_codes, is_prefix_free
from .errors import (
    CorruptHeaderError,
    CorruptStreamError,
    EmptyInputError,
    FormatError,
    FrequencyOverflowError,
    HuffmanError,
    SymbolRangeError,
    TruncatedStreamError,
)
from .frequency import count_frequencies
from .heap import PriorityQueue
from .tree import Internal, Leaf, build_tree

__version__ = "1.0.0"
