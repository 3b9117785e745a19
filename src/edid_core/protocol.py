"""EDID extraction protocol constants.

Single source of truth for the literal markers of both input dialects and the
size limits applied while decoding. Parsers, writer and tests must stay in sync
with these values.
"""

# Verbose X log dialect
LOG_HEADER = b"Raw EDID bytes:"
LOG_LABEL_GPU = b"NVIDIA(GPU"  # NVIDIA(GPU-0): ...
LOG_LABEL_SCREEN = b"NVIDIA("  # NVIDIA(0): ...
LOG_LABEL_PREFIXES = (LOG_LABEL_GPU, LOG_LABEL_SCREEN)  # order matters
LOG_FOOTER_START = b"--- End of EDID for "
LOG_FOOTER_END = b" ---"

# Plain-text dump dialect
TEXT_MARKER = b"EDID Version"
TEXT_NAME_FIELD = b"Monitor Name"
CRLF = b"\r\n"

# Bounds
MAX_EDID_SIZE = 4096
MAX_NAME_LEN = 512

UNKNOWN_NAME = "unknown"
DEFAULT_OUTPUT_NAME = "edid.bin"
OUTPUT_FILE_MODE = 0o644
