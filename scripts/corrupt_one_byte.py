import sys
from pathlib import Path

def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: corrupt_one_byte.py <file> [offset]")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    idx = int(sys.argv[2]) if len(sys.argv) == 3 else 8
    b = bytearray(p.read_bytes())
    if idx >= len(b):
        print(f"File too small to corrupt offset {idx}.")
        raise SystemExit(2)

    # Default offset 8 is the first manufacturer ID byte of an EDID base block.
    b[idx] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
