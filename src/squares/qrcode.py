import logging

from .codewords import compose_message, correction_encode
from .errors import EmptyInput, QRCodeError
from .masking import select_mask
from .matrix import QRMatrix
from .modes import (
    check_length, encode_data, finalize_bits, normalize_kanji, select_level,
    select_mode, select_version
)
from .tables import capacity_table
from .terminal import MARGIN_WIDTH, with_quiet_zone


logger = logging.getLogger(__name__)


class QRCode:
    """QR symbol of a text payload.

    Mode, error correction level and version are all derived from the
    payload, the strictest level still able to hold it is used. The
    final module grid is available as ``matrix``, a list of rows with
    1 for dark and 0 for light modules.
    """
    dimensionality = "2D"

    def __init__(self, data):
        if not data:
            raise EmptyInput()
        self.mode = select_mode(data)
        if self.mode == "kanji":
            data = normalize_kanji(data)
        length = len(data)
        check_length(length, self.mode)
        self.level = select_level(length, self.mode)
        self.version = select_version(self.mode, self.level, length)
        self.width = 17 + 4 * self.version
        logger.debug(
            "Version: %d, correction level: %s, encoding mode: %s",
            self.version, self.level, self.mode
        )
        entry = capacity_table[self.level, self.version]
        bits = encode_data(data, self.mode, self.version)
        self.data_codewords = finalize_bits(bits, entry).to_bytes()
        data_blocks, ec_blocks = correction_encode(self.data_codewords, entry)
        self.bits = compose_message(data_blocks, ec_blocks, self.version)
        unmasked = QRMatrix(self.version).build()
        unmasked.place_data(self.bits)
        self.mask_index, masked, self.penalty = select_mask(
            unmasked, self.level
        )
        logger.debug(
            "Selected mask %d with penalty %d", self.mask_index, self.penalty
        )
        self.matrix = masked.to_bits()

    @classmethod
    def image_bits(cls, data, margin=MARGIN_WIDTH):
        """Module grid surrounded by a quiet zone of light modules"""
        return with_quiet_zone(cls(data).matrix, margin)


def encode(data):
    """Module grid of the QR symbol encoding data.

    :param str data:    text to encode
    :return:            list of rows, 1 for dark and 0 for light modules
    :raises QRCodeError:    when data can't be encoded
    """
    return QRCode(data).matrix


def try_encode(data):
    """Like encode, but returns None instead of raising when data can't
    be encoded"""
    try:
        return encode(data)
    except QRCodeError as exc:
        logger.warning("%s", exc)
        return None
