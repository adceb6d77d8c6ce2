import numpy as np

from .errors import SymbolRangeError

# 16-bit code units: 0..65535
ALPHABET_SIZE = 1 << 16
MAX_SYMBOL = ALPHABET_SIZE - 1


def _integers_only(source):
    # fromiter would silently truncate floats and parse numeric strings
    for value in source:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise SymbolRangeError(f"Symbols must be integers, got {value!r}")
        yield value


def as_symbol_array(source):
    """
    Reads a symbol source (any iterable of ints, or an integer numpy array)
    into a flat int64 array and checks every value is a valid symbol.

    The source is consumed, so generators cannot be reused afterwards.
    """
    if isinstance(source, np.ndarray):
        if source.dtype.kind not in "iu":
            raise SymbolRangeError(f"Symbols must be integers, got dtype {source.dtype}")
        symbols = source.astype(np.int64).ravel()
    else:
        try:
            symbols = np.fromiter(_integers_only(source), dtype=np.int64)
        except SymbolRangeError:
            raise
        except (TypeError, ValueError, OverflowError) as e:
            raise SymbolRangeError(f"Source holds a value that is not a symbol: {e}") from e

    if symbols.size and (symbols.min() < 0 or symbols.max() > MAX_SYMBOL):
        raise SymbolRangeError(f"Symbols must be within 0..{MAX_SYMBOL}")
    return symbols


def count_frequencies(source):
    """
    Counts how often each symbol occurs.
    Returns (frequency_table, distinct_count); the table only holds symbols
    that occur, keyed in ascending order.
    """
    symbols = as_symbol_array(source)
    counts = np.bincount(symbols, minlength=ALPHABET_SIZE)

    frequency = {}
    distinct_count = 0
    for symbol in np.flatnonzero(counts):
        frequency[int(symbol)] = int(counts[symbol])
        distinct_count += 1  # first time this symbol went from 0 to 1

    return frequency, distinct_count
