from __future__ import annotations

# Byte-level constants shared by the detector and both readers.
# Keep these centralized to reduce magic values and accidental divergence.

ID3V2_MARKER = b"ID3"
ID3V2_HEADER_SIZE = 10
FRAME_HEADER_SIZE = 10

ID3V1_MARKER = b"TAG"
ID3V1_BLOCK_SIZE = 128

TITLE = "TIT2"
ARTIST = "TPE1"
ALBUM = "TALB"
YEAR = "TYER"

ENCODING_SINGLE_BYTE = 0
ENCODING_DOUBLE_BYTE = 1
