class QRCodeError(ValueError):
    """Base class of all reasons a payload can't become a QR code"""


class EmptyInput(QRCodeError):
    def __init__(self):
        super().__init__("Nothing to encode, the input is empty")


class TooLong(QRCodeError):
    def __init__(self, length, mode, capacity):
        self.length = length
        self.mode = mode
        self.capacity = capacity
        super().__init__(
            "The input is too long, {} {} characters don't fit "
            "into {}".format(length, mode, capacity)
        )


class InvalidCharacter(QRCodeError):
    def __init__(self, character):
        self.character = character
        super().__init__(
            "Character {!r} is invalid, the QR code couldn't be "
            "generated".format(character)
        )


class KanjiRangeFailure(QRCodeError):
    def __init__(self, character, code):
        self.character = character
        self.code = code
        super().__init__(
            "Character {!r} has Shift JIS code {:#06x} outside of "
            "kanji mode ranges".format(character, code)
        )
