"""Adapters between files, text, bytes and 16-bit symbol streams."""
import numpy as np

from .errors import SymbolRangeError
from .frequency import as_symbol_array

MODES = ("text", "bytes")


def _empty():
    return np.empty(0, dtype=np.int64)


### TEXT <-> SYMBOLS ###
def text_to_symbols(text):
    # One symbol per UTF-16 code unit; astral characters become a surrogate pair
    data = text.encode("utf-16-be", "surrogatepass")
    if not data:
        return _empty()
    return np.frombuffer(data, dtype=">u2").astype(np.int64)


def symbols_to_text(symbols):
    units = as_symbol_array(symbols).astype(">u2")
    return units.tobytes().decode("utf-16-be", "surrogatepass")


### BYTES <-> SYMBOLS ###
def bytes_to_symbols(data):
    if not data:
        return _empty()
    return np.frombuffer(data, dtype=np.uint8).astype(np.int64)


def symbols_to_bytes(symbols):
    values = as_symbol_array(symbols)
    if values.size and values.max() > 0xFF:
        raise SymbolRangeError(f"Symbol {int(values.max())} does not fit in a byte")
    return values.astype(np.uint8).tobytes()


### FILES ###
def _check_mode(mode):
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}, expected one of {MODES}")


def read_symbols(path, mode="bytes"):
    """Reads a whole file as symbols. Text files are read as UTF-8."""
    _check_mode(mode)
    if mode == "text":
        with open(path, "r", encoding="utf-8", newline="") as f:
            return text_to_symbols(f.read())
    with open(path, "rb") as f:
        return bytes_to_symbols(f.read())


def write_symbols(path, symbols, mode="bytes"):
    _check_mode(mode)
    if mode == "text":
        # Encode before opening so a failure leaves no file behind
        try:
            data = symbols_to_text(symbols).encode("utf-8")
        except UnicodeEncodeError as e:
            raise SymbolRangeError(f"Symbols do not form valid text: {e}") from e
    else:
        data = symbols_to_bytes(symbols)
    with open(path, "wb") as f:
        f.write(data)
