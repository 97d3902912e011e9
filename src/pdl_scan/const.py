ERRORS = {
  "E_KEY_TOO_LONG": "Decryption key exceeds 16 bytes",
  "E_CIPHER_SETUP": "Cipher key schedule could not be established",
  "E_SOURCE_UNAVAILABLE": "Input blob could not be read",
  "E_SINK_UNAVAILABLE": "Output destination could not be written",
}


class FatalError(ValueError):
    """Unrecoverable scan failure tagged with an ERRORS code."""

    def __init__(self, code: str, detail: str | None = None):
        self.code = code
        self.detail = detail
        message = f"[{code}] {ERRORS[code]}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
