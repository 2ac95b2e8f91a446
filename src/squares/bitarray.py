class BitArray:
    """Append-only big endian sequence of bits.

    Whole bytes are kept in a bytearray, bits of the unfinished last
    byte wait in a small integer buffer.
    """
    def __init__(self, b=None):
        self.byte_array = bytearray(b) if b is not None else bytearray()
        self.buffer = 0
        self.buffer_len = 0

    def __len__(self):
        return 8 * len(self.byte_array) + self.buffer_len

    def __str__(self):
        return "BitArray({})".format(self.to_bitstring())

    def __iter__(self):
        for byte in self.byte_array:
            for shift in range(7, -1, -1):
                yield (byte >> shift) & 1
        for shift in range(self.buffer_len - 1, -1, -1):
            yield (self.buffer >> shift) & 1

    def extend(self, number, encode_len):
        """Appends number as encode_len bits, most significant first"""
        if number < 0 or number.bit_length() > encode_len:
            raise ValueError(
                "{} doesn't fit into {} bits".format(number, encode_len)
            )
        number |= self.buffer << encode_len
        encode_len += self.buffer_len
        self.buffer_len = encode_len % 8
        self.buffer = number & (0xff >> (8 - self.buffer_len))
        number >>= self.buffer_len
        encode_len -= self.buffer_len
        encode_bytes = encode_len // 8
        if encode_bytes > 0:
            self.byte_array.extend(number.to_bytes(encode_bytes, "big"))

    def to_bytes(self):
        if self.buffer_len > 0:
            b = self.buffer << (8 - self.buffer_len)
            return bytes(self.byte_array) + bytes((b,))
        else:
            return bytes(self.byte_array)

    def to_bitstring(self):
        return "".join(str(bit) for bit in self)
