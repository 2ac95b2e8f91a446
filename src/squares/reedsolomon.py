from .galoisfield import GF256


MAX_CORRECTION_CODEWORDS = 30


def compute_generator(degree, gf=GF256):
    """Generator polynomial (x - a^0)(x - a^1)...(x - a^(degree - 1))"""
    length = degree + 1
    res_poly = [0] * length
    res_poly[0] = 1
    for i in range(1, length):
        k = gf.exp(i - 1)
        for j in range(i, 0, -1):
            m = gf.mul(res_poly[j - 1], k)
            res_poly[j] = gf.add(res_poly[j], m)
    return bytes(res_poly)


# indexed by the number of error correction codewords
generator_polynomials = tuple(
    compute_generator(degree)
    for degree in range(MAX_CORRECTION_CODEWORDS + 1)
)


class ReedSolomonEncoder:
    def __init__(self, corrections_len):
        if not 0 < corrections_len <= MAX_CORRECTION_CODEWORDS:
            raise ValueError(
                "Unsupported number of error correction codewords: "
                "{}".format(corrections_len)
            )
        self.gf = GF256
        self.corrections_len = corrections_len
        self.generator = generator_polynomials[corrections_len]

    def encode_block(self, data):
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError("Data should be bytes type")
        correction_data = self.gf.poly_mod(data, self.generator)
        return bytes(correction_data)

    def syndromes(self, codeword):
        """Evaluations of data + correction codewords at the generator
        roots, all zero for an intact block"""
        return [
            self.gf.poly_eval(codeword, self.gf.exp(i))
            for i in range(self.corrections_len)
        ]
