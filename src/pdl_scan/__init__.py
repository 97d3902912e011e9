"""PDL Scan - Layout search, decryption and reporting."""
from .const import ERRORS, FatalError
from .crypto import decrypt_buffer, encrypt_buffer, pad_key
from .search import detect_layout, is_plausible, recover, scan_run, try_record_size

__all__ = [
    "ERRORS",
    "FatalError",
    "decrypt_buffer",
    "encrypt_buffer",
    "pad_key",
    "detect_layout",
    "is_plausible",
    "recover",
    "scan_run",
    "try_record_size",
]
