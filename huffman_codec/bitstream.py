"""
Wire format of a compressed stream.

    [4 bytes]  number of distinct symbols (big-endian unsigned)
    repeated once per symbol, ascending symbol order:
      [2 bytes] symbol
      [4 bytes] frequency (big-endian unsigned)
    [remaining bytes] code bits, MSB-first, last byte zero-padded

Only the frequency table is stored. The decoder rebuilds the same tree from
it, and the sum of the frequencies tells it how many symbols to emit, so the
padding bits in the last byte are never decoded.
"""
import numpy as np

from .codes import generate_codes
from .errors import (
    CorruptHeaderError,
    CorruptStreamError,
    EmptyInputError,
    FrequencyOverflowError,
    SymbolRangeError,
    TruncatedStreamError,
)
from .frequency import ALPHABET_SIZE, MAX_SYMBOL, as_symbol_array, count_frequencies
from .tree import Leaf, build_tree

COUNT_FIELD = np.dtype(">u4")
HEADER_ENTRY = np.dtype([("symbol", ">u2"), ("frequency", ">u4")])
MAX_FREQUENCY = 0xFFFFFFFF


### HEADER ###
def write_header(frequency):
    """Serializes a frequency table (symbol -> count) in ascending symbol order."""
    entries = np.empty(len(frequency), dtype=HEADER_ENTRY)
    for i, symbol in enumerate(sorted(frequency)):
        count = frequency[symbol]
        if not 0 <= symbol <= MAX_SYMBOL:
            raise SymbolRangeError(f"Symbol {symbol} does not fit in 2 bytes")
        if count > MAX_FREQUENCY:
            raise FrequencyOverflowError(f"Frequency {count} of symbol {symbol} does not fit in 4 bytes")
        entries[i] = (symbol, count)

    count_field = np.array([len(frequency)], dtype=COUNT_FIELD)
    return count_field.tobytes() + entries.tobytes()


def read_header(data):
    """
    Parses the header at the start of `data`.
    Returns (frequency_table, body_offset).
    """
    if len(data) < COUNT_FIELD.itemsize:
        raise CorruptHeaderError("Header truncated (distinct symbol count)")

    distinct_count = int(np.frombuffer(data, dtype=COUNT_FIELD, count=1)[0])
    if distinct_count == 0:
        raise CorruptHeaderError("Header declares no symbols")
    if distinct_count > ALPHABET_SIZE:
        raise CorruptHeaderError(f"Header declares {distinct_count} symbols, more than the alphabet holds")

    body_offset = COUNT_FIELD.itemsize + distinct_count * HEADER_ENTRY.itemsize
    if len(data) < body_offset:
        raise CorruptHeaderError(
            f"Header declares {distinct_count} symbols but only "
            f"{len(data) - COUNT_FIELD.itemsize} table bytes follow"
        )

    entries = np.frombuffer(data, dtype=HEADER_ENTRY, count=distinct_count, offset=COUNT_FIELD.itemsize)
    symbols = entries["symbol"].astype(np.int64)
    counts = entries["frequency"].astype(np.int64)

    if np.any(np.diff(symbols) <= 0):
        raise CorruptHeaderError("Header symbols are not in strictly ascending order")
    if np.any(counts == 0):
        raise CorruptHeaderError("Header holds a symbol with zero frequency")

    return dict(zip(symbols.tolist(), counts.tolist())), body_offset


### BODY ###
def encoded_bit_length(frequency, codes):
    return sum(count * len(codes[symbol]) for symbol, count in frequency.items())


def pack_bits(bits):
    """Packs a '0'/'1' string MSB-first into bytes, zero-padding the last byte."""
    if not bits:
        return b""
    array = np.frombuffer(bits.encode("ascii"), dtype=np.uint8) - ord("0")
    return np.packbits(array).tobytes()


def encode(source, codes, frequency):
    """
    Writes the header for `frequency` followed by the code bits of every
    symbol in `source`, in stream order.
    """
    if not frequency:
        raise EmptyInputError("Nothing to encode")

    symbols = as_symbol_array(source)
    if symbols.size != sum(frequency.values()):
        raise ValueError(
            f"Source holds {symbols.size} symbols but the frequency table "
            f"counts {sum(frequency.values())}"
        )

    header = write_header(frequency)
    try:
        bits = "".join([codes[symbol] for symbol in symbols.tolist()])
    except KeyError as e:
        raise SymbolRangeError(f"Symbol {e.args[0]} has no Huffman code") from e

    return header + pack_bits(bits)


def decode(data):
    """
    Rebuilds the tree from the header and walks it bit by bit:
    0 goes left, 1 goes right, a leaf emits its symbol and restarts at the root.
    Returns the decoded symbols as a list of ints.
    """
    frequency, body_offset = read_header(data)
    root = build_tree(frequency)
    total_symbols = sum(frequency.values())

    # Exact body size is known from the table
    expected_bits = encoded_bit_length(frequency, generate_codes(root))
    expected_bytes = (expected_bits + 7) // 8
    body = bytes(data[body_offset:])
    if len(body) < expected_bytes:
        raise TruncatedStreamError(f"Body holds {len(body)} bytes, expected {expected_bytes}")
    if len(body) > expected_bytes:
        raise CorruptStreamError(f"Body holds {len(body) - expected_bytes} unexpected trailing bytes")

    bits = np.unpackbits(np.frombuffer(body, dtype=np.uint8)).tolist() if body else []

    decoded = []
    current_node = root
    for bit in bits:
        if len(decoded) == total_symbols:
            break  # the rest is padding
        current_node = current_node.right if bit else current_node.left
        if current_node is None:
            raise CorruptStreamError("Bit sequence leads outside the Huffman tree")
        if isinstance(current_node, Leaf):
            decoded.append(current_node.symbol)
            current_node = root

    if len(decoded) < total_symbols:
        raise TruncatedStreamError(f"Stream ended after {len(decoded)} of {total_symbols} symbols")
    if count_frequencies(decoded)[0] != frequency:
        raise CorruptStreamError("Decoded symbols do not match the header frequencies")

    return decoded
