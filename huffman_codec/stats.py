"""Numbers and strings for the size/time reports shown by the front ends."""


def compression_ratio(original_size, compressed_size):
    # Compressed size as a percentage of the original
    if original_size == 0:
        return 0.0
    return compressed_size / original_size * 100


def saved_percent(original_size, compressed_size):
    if original_size == 0:
        return 0.0
    return round((original_size - compressed_size) / original_size * 100, 2)


def split_elapsed(elapsed_ms):
    total = int(elapsed_ms)
    minutes = total // 60000
    seconds = (total % 60000) // 1000
    millis = total % 1000
    return minutes, seconds, millis


def format_elapsed(elapsed_ms):
    minutes, seconds, millis = split_elapsed(elapsed_ms)
    return f"{minutes} min {seconds} sec {millis} ms"


def format_bytes(size):
    if size == 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB"]
    value = float(size)
    i = 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    if i == 0:
        return f"{size} B"
    return f"{value:.2f} {units[i]}"
