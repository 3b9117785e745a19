"""Generate synthetic EDID inputs: a verbose X log or a plain-text dump.

Each run also stores the raw EDIDs it embedded under OUT_DIR/reference/ so the
extracted files can be compared byte for byte.
"""
import struct
from pathlib import Path

LOG_TIMESTAMP = "Dec 29 15:27:13"


def calculate_checksum(data):
    """Calculate EDID checksum (sum of all bytes must be 0 mod 256)"""
    return (256 - (sum(data) % 256)) % 256


def make_edid(name: str, serial: int = 0) -> bytes:
    """Build a 128-byte EDID base block carrying ``name`` as product name."""
    edid = bytearray(128)

    # Header
    edid[0:8] = [0x00, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x00]

    # Manufacturer "VHD", product code, serial
    edid[8] = 0x56
    edid[9] = 0x24
    edid[10:12] = struct.pack("<H", 0x5344)
    edid[12:16] = struct.pack("<I", serial)

    # Week 1 of 2023, EDID 1.4, digital 8-bit DisplayPort
    edid[16] = 1
    edid[17] = 33
    edid[18] = 1
    edid[19] = 4
    edid[20] = 0xA5

    # Standard timings unused
    edid[38:54] = [0x01, 0x01] * 8

    # Display product name descriptor
    name_bytes = name[:13].encode("ascii")
    if len(name_bytes) < 13:
        name_bytes += b"\n"
    name_bytes = name_bytes + b" " * (13 - len(name_bytes))
    edid[72:90] = [0x00, 0x00, 0x00, 0xFC, 0x00] + list(name_bytes)

    edid[127] = calculate_checksum(edid[0:127])
    return bytes(edid)


def _hex_rows(data: bytes, sep: str) -> list[tuple[str, bytes]]:
    rows = []
    for off in range(0, len(data), 16):
        row = data[off:off + 16]
        left = " ".join(f"{b:02x}" for b in row[:8])
        right = " ".join(f"{b:02x}" for b in row[8:])
        rows.append((f"{left}{sep}{right}".rstrip(), row))
    return rows


def render_log(edids: list[tuple[str, bytes]], *, gpu: bool = False, timestamps: bool = False) -> str:
    prefix = f"(--) {LOG_TIMESTAMP} " if timestamps else "(--) "
    label = "NVIDIA(GPU-0)" if gpu else "NVIDIA(0)"
    lead = f"{prefix}{label}:"

    lines = [
        "(II) NVIDIA dlloader X Driver  470.199.02  Thu May 11 11:46:56 UTC 2023",
        f"{lead} Validated MetaModes:",
    ]
    for i, (name, data) in enumerate(edids):
        lines.append(f"{lead} --- EDID for {name} (DFP-{i}) ---")
        lines.append(f"{lead} EDID Version                 : 1.4")
        lines.append(f"{lead} Raw EDID bytes:")
        lines.append(f"{lead}")
        for text, _ in _hex_rows(data, "  "):
            lines.append(f"{lead}   {text}")
        lines.append(f"{lead}")
        lines.append(f"{lead} --- End of EDID for {name} (DFP-{i}) ---")
    lines.append("(II) NVIDIA(0): Setting mode \"DFP-0:nvidia-auto-select\"")
    return "\n".join(lines) + "\n"


def render_text(name: str, data: bytes) -> str:
    lines = []
    for text, row in _hex_rows(data, "-"):
        ascii_col = "".join(chr(b) if 32 <= b < 127 else "." for b in row)
        lines.append(f"{text.upper()}    {ascii_col}")
    lines.append("")
    lines.append("EDID Version      : 1.4")
    lines.append("Manufacturer ID   : VHD")
    lines.append(f"Monitor Name      : {name}")
    return "\r\n".join(lines) + "\r\n"


def generate_sample(output_dir: str, *, count: int = 1, text: bool = False,
                    gpu: bool = False, timestamps: bool = False) -> Path:
    out = Path(output_dir)
    ref = out / "reference"
    ref.mkdir(parents=True, exist_ok=True)

    edids = [(f"Sample {i}", make_edid(f"Sample {i}", serial=i)) for i in range(count)]
    for i, (_, data) in enumerate(edids):
        (ref / f"{i:02d}.bin").write_bytes(data)

    if text:
        name, data = edids[0]
        path = out / "edid.txt"
        path.write_bytes(render_text(name, data).encode("ascii"))
    else:
        path = out / "Xorg.0.log"
        path.write_bytes(render_log(edids, gpu=gpu, timestamps=timestamps).encode("ascii"))

    print(f"GENERATED: {path}")
    return path


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/sample_logs.py OUT_DIR [--count N] [--text] [--gpu] [--timestamps]

    args = [a for a in sys.argv[1:] if a]

    def pop_flag(arg_list: list[str], flag: str) -> tuple[bool, list[str]]:
        """Remove a boolean flag from an argv-style list."""
        if flag in arg_list:
            return True, [a for a in arg_list if a != flag]
        return False, arg_list

    text, args = pop_flag(args, "--text")
    gpu, args = pop_flag(args, "--gpu")
    timestamps, args = pop_flag(args, "--timestamps")

    count = 1
    if "--count" in args:
        i = args.index("--count")
        if i + 1 >= len(args):
            raise SystemExit("--count requires a value")
        count = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    out = args[0] if len(args) > 0 else "sample_inputs"
    generate_sample(out, count=count, text=text, gpu=gpu, timestamps=timestamps)
