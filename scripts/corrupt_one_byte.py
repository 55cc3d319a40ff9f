import sys
from pathlib import Path

# Signature is 8 bytes, first chunk header is 8 bytes (length + type).
# Default target is the first payload byte of the first chunk (IHDR).
DEFAULT_OFFSET = 8 + 8


def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: corrupt_one_byte.py <file> [offset]")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    idx = int(sys.argv[2], 0) if len(sys.argv) == 3 else DEFAULT_OFFSET
    b = bytearray(p.read_bytes())
    if idx >= len(b):
        print(f"Offset {idx} is past end of file ({len(b)} bytes).")
        raise SystemExit(2)

    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
