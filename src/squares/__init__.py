"""QR code symbol encoder with no dependencies.

Turns text into the module grid of a QR code, picking encoding mode,
error correction level, version and mask automatically.
"""
from .codewords import compose_message, correction_encode, interleave_blocks
from .errors import (
    EmptyInput, InvalidCharacter, KanjiRangeFailure, QRCodeError, TooLong
)
from .masking import penalty, select_mask
from .matrix import QRMatrix
from .modes import (
    encode_data, finalize_bits, select_level, select_mode, select_version
)
from .qrcode import QRCode, encode, try_encode
from .reedsolomon import ReedSolomonEncoder
from .terminal import render_ansi, render_numbers, render_text, with_quiet_zone

__version__ = "0.1.0"
