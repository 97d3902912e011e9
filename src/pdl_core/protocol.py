"""PDL map blob protocol constants.

Single source of truth for the layout search space and plausibility bounds.
Enumeration order matters: earlier entries win ties during layout detection.
"""
from types import MappingProxyType

# Candidate record widths in bytes, in tie-break order
RECORD_SIZES = (16, 20, 24, 32)

# Record head: [TypeID(4) | X(4) | Y(4) | Z(4)] = 16 bytes
RECORD_HEAD_FMT = "Ifff"
RECORD_HEAD_LEN = 16

# Header skips tried: 0, 4, ..., 60
HEADER_OFFSET_LIMIT = 64
HEADER_OFFSET_STEP = 4

# Coordinates at or beyond this magnitude are treated as noise
COORD_LIMIT = 100000.0

# AES-128 in ECB mode
CIPHER_BLOCK_LEN = 16
CIPHER_KEY_LEN = 16

# Known object type IDs
TYPE_NAMES = MappingProxyType({
    3437124069: "Vehicle",
    1462988517: "Road",
})
FALLBACK_TYPE_NAME = "Object"
