ERRORS = {
  "E_OPEN": "File could not be opened",
  "E_EOF": "Stream ended inside a required field",
  "E_NOT_PNG": "not a PNG file",
  "E_SIG_CORRUPT": "PNG file is CORRUPTED.",
  "E_CHUNK_NAME": "Chunk name doesn't comply to naming rules",
  "W_NO_IHDR": "file doesn't start with a IHDR chunk",
  "E_CRC_MISMATCH": "Stored chunk CRC does not match computed CRC",
  "E_TRAILING_DATA": "additional data after IEND chunk",
  "E_NO_IEND": "file doesn't end with a IEND chunk",
}

OK_MESSAGE = "file appears to be OK"


class CheckFailure(ValueError):
    """Fatal validation problem; ends checking of the current file."""

    def __init__(self, code: str, message: str | None = None, **detail):
        super().__init__(message or ERRORS[code])
        self.code = code
        self.message = message or ERRORS[code]
        self.detail = detail

    def as_error(self) -> dict:
        return {"code": self.code, "message": self.message, **self.detail}
