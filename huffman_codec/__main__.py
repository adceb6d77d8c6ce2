import sys

from .codec import compress_file, decompress_file, mode_for_filename
from .errors import HuffmanError
from .stats import format_elapsed

USAGE = "Usage: python -m huffman_codec [c|d] input_file output_file [text|bytes]"


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (3, 4):
        print(USAGE)
        return 1

    command, inp, outp = args[:3]
    mode = args[3] if len(args) == 4 else mode_for_filename(inp)

    try:
        if command == "c":
            result = compress_file(inp, outp, mode)
            if result["empty"]:
                print("The input file is empty. No compression needed.")
                return 0
            print(f"Original File Size: {result['original_size']} bytes")
            print(f"Compressed File Size: {result['compressed_size']} bytes")
            print(f"Compression Ratio: {result['ratio']:.2f}%")
            print(f"Time Taken to Compress: {format_elapsed(result['elapsed_ms'])}")
        elif command == "d":
            result = decompress_file(inp, outp, mode)
            print(f"Compressed File Size: {result['compressed_size']} bytes")
            print(f"Decompressed File Size: {result['decompressed_size']} bytes")
            print(f"Time Taken to Decompress: {format_elapsed(result['elapsed_ms'])}")
        else:
            print("Invalid mode. Use 'c' for compression, 'd' for decompression.")
            return 1
    except (OSError, HuffmanError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
