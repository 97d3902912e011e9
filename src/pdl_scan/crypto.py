from warnings import warn

from Crypto.Cipher import AES

from pdl_core.protocol import CIPHER_BLOCK_LEN, CIPHER_KEY_LEN

from .const import FatalError


def pad_key(key: str | bytes) -> bytes:
    """Right-pad a key with NUL bytes to 16 bytes (AES-128)."""
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    if len(raw) > CIPHER_KEY_LEN:
        raise FatalError("E_KEY_TOO_LONG", f"{len(raw)} bytes")
    return raw.ljust(CIPHER_KEY_LEN, b"\x00")


def _ecb(key: str | bytes):
    padded = pad_key(key)
    try:
        return AES.new(padded, AES.MODE_ECB)
    except ValueError as e:
        raise FatalError("E_CIPHER_SETUP", str(e)) from e


def _aligned_len(data: bytes) -> int:
    aligned = len(data) - len(data) % CIPHER_BLOCK_LEN
    if aligned != len(data):
        warn(f"{len(data) - aligned} trailing bytes after offset {aligned} left as-is")
    return aligned


def decrypt_buffer(data: bytes, key: str | bytes) -> bytes:
    """Decrypt every complete 16-byte block independently.

    Trailing bytes that do not fill a block are passed through unchanged.
    """
    cipher = _ecb(key)
    aligned = _aligned_len(data)
    return cipher.decrypt(bytes(data[:aligned])) + bytes(data[aligned:])


def encrypt_buffer(data: bytes, key: str | bytes) -> bytes:
    cipher = _ecb(key)
    aligned = _aligned_len(data)
    return cipher.encrypt(bytes(data[:aligned])) + bytes(data[aligned:])
