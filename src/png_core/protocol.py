"""PNG container constants.

Single source of truth for the signature, chunk layout and the tags the
checker cares about. Verifier and fixture encoder must stay in sync.
"""

# Signature: [0x89 | "PNG" | CR LF SUB LF] = 8 bytes
PNG_MARKER = 0x89
PNG_NAME = b"PNG"
PNG_TRAILER = b"\r\n\x1a\n"
PNG_SIGNATURE = bytes([PNG_MARKER]) + PNG_NAME + PNG_TRAILER
SIGNATURE_LEN = 8

# Chunk: [Length(4) | Type(4) | Data(Length) | CRC(4)], big-endian
U32_FMT = ">I"
U32_LEN = 4
CHUNK_HEADER_FMT = ">I4s"
CHUNK_TAG_LEN = 4

# Tags with special handling
TAG_START = b"IHDR"
TAG_END = b"IEND"
TAG_TEXT = b"tEXt"

# Payload read block; also the default for --block-size
BLOCK_SIZE = 32 * 1024
