import os
import time

from .bitstream import decode, encode
from .codes import generate_codes
from .frequency import as_symbol_array, count_frequencies
from .symbols import read_symbols, write_symbols
from .stats import compression_ratio, saved_percent
from .tree import build_tree


### IN-MEMORY API ###
def compress(source):
    """
    Huffman-codes a stream of 16-bit symbols.
    Returns the compressed bytes, or None when the source holds no symbols.
    """
    symbols = as_symbol_array(source)  # read once, encoded in a second pass
    frequency, distinct_count = count_frequencies(symbols)
    if distinct_count == 0:
        return None

    root = build_tree(frequency)
    codes = generate_codes(root)
    return encode(symbols, codes, frequency)


def decompress(data):
    """Inverse of compress(). Empty data (nothing was compressed) gives []."""
    if not data:
        return []
    return decode(data)


### FILE COMMANDS ###
def mode_for_filename(filename):
    """'text' for .txt files (with or without a trailing .huff), else 'bytes'."""
    name = filename.lower()
    if name.endswith(".huff"):
        name = name[:-5]
    return "text" if name.endswith(".txt") else "bytes"


def compress_file(input_path, output_path, mode="bytes"):
    """
    Compresses a file. An empty input produces an empty output file.
    Returns a dict of sizes and timing for the caller to report.
    """
    t0 = time.time()
    symbols = read_symbols(input_path, mode)
    compressed = compress(symbols)

    with open(output_path, "wb") as output_file:
        output_file.write(compressed or b"")
    elapsed_ms = (time.time() - t0) * 1000

    original_size = os.path.getsize(input_path)
    compressed_size = os.path.getsize(output_path)
    return {
        "success": True,
        "empty": compressed is None,
        "mode": mode,
        "symbols": int(symbols.size),
        "distinct_symbols": count_frequencies(symbols)[1],
        "original_size": original_size,
        "compressed_size": compressed_size,
        "saved": original_size - compressed_size,
        "saved_percent": saved_percent(original_size, compressed_size),
        "ratio": round(compression_ratio(original_size, compressed_size), 2),
        "elapsed_ms": round(elapsed_ms, 3),
    }


def decompress_file(input_path, output_path, mode="bytes"):
    """
    Decompresses a file. The output is only written once decoding succeeded,
    so a corrupt input never leaves a partial file behind.
    """
    t0 = time.time()
    with open(input_path, "rb") as input_file:
        data = input_file.read()

    symbols = decompress(data)
    write_symbols(output_path, symbols, mode)
    elapsed_ms = (time.time() - t0) * 1000

    return {
        "success": True,
        "mode": mode,
        "symbols": len(symbols),
        "compressed_size": os.path.getsize(input_path),
        "decompressed_size": os.path.getsize(output_path),
        "elapsed_ms": round(elapsed_ms, 3),
    }
