def modulo_gf2(a, mod):
    """Remainder of polynomial division over GF(2)

    Polynomials are encoded as integers, bit i being the coefficient
    of x^i.
    """
    mod_bitlen = mod.bit_length()
    a_bitlen = a.bit_length()
    if a_bitlen < mod_bitlen:
        return a
    m = mod << (a_bitlen - mod_bitlen)
    bit = 1 << (a_bitlen - 1)
    while m >= mod:
        if a & bit:
            a ^= m
        bit >>= 1
        m >>= 1
    return a


class GaloisField:
    """GF(2^n) arithmetic backed by exponent and logarithm tables.

    Polynomials over the field are sequences of elements, highest
    degree first.
    """
    def __init__(self, primitive_poly=285):
        self.primitive_poly = primitive_poly
        power = primitive_poly.bit_length()
        self.element_count = 2 ** (power - 1) - 1
        exp_table = [1] * (self.element_count + 1)
        log_table = [0] * (self.element_count + 1)
        for i in range(1, self.element_count):
            e = modulo_gf2(2 * exp_table[i - 1], primitive_poly)
            exp_table[i] = e
            log_table[e] = i
        log_table[0] = None
        self.exp_table = tuple(exp_table)
        self.log_table = tuple(log_table)

    def mul(self, a, b):
        if a == 0 or b == 0:
            return 0
        power = self.log_table[a] + self.log_table[b]
        return self.exp_table[power % self.element_count]

    def add(self, a, b):
        return a ^ b

    def exp(self, a):
        return self.exp_table[a % self.element_count]

    def log(self, a):
        if a == 0:
            raise ValueError("Logarithm of zero is undefined")
        return self.log_table[a]

    def poly_mul(self, a, b):
        res = [0] * (len(a) + len(b) - 1)
        for i, ai in enumerate(a):
            for j, bj in enumerate(b):
                res[i + j] = self.add(res[i + j], self.mul(ai, bj))
        return res

    def poly_mod(self, a, b):
        """Remainder of a divided by the monic polynomial b.

        Synthetic division carried out in the logarithm domain, the
        result has len(b) - 1 coefficients.
        """
        a_len = len(a)
        res = list(a) + [0] * (len(b) - 1)
        b_logs = [None if c == 0 else self.log_table[c] for c in b]
        for i in range(a_len):
            lead = res[i]
            if lead == 0:
                continue
            lead_log = self.log_table[lead]
            for j, coeff_log in enumerate(b_logs):
                if coeff_log is not None:
                    power = (lead_log + coeff_log) % self.element_count
                    res[i + j] ^= self.exp_table[power]
        return res[a_len:]

    def poly_eval(self, polynomial, x):
        # Horner scheme polynomial evaluation
        y = polynomial[0]
        for i in range(1, len(polynomial)):
            m = self.mul(y, x)
            y = self.add(polynomial[i], m)
        return y


# x^8 + x^4 + x^3 + x^2 + 1
GF256 = GaloisField(0b100011101)
