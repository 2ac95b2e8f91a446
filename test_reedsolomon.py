import pytest

from squares.galoisfield import GF256, modulo_gf2
from squares.reedsolomon import ReedSolomonEncoder, generator_polynomials


def test_log_table_is_bijection():
    logs = [GF256.log(a) for a in range(1, 256)]
    assert sorted(logs) == list(range(255))
    for a in range(1, 256):
        assert GF256.exp(GF256.log(a)) == a


def test_field_multiplication():
    assert GF256.mul(2, 128) == 0x1d
    assert GF256.mul(0, 77) == 0
    assert GF256.mul(77, 1) == 77
    for a in (3, 29, 200):
        for b in (5, 99, 255):
            assert GF256.mul(a, b) == GF256.mul(b, a)


def test_log_of_zero():
    with pytest.raises(ValueError):
        GF256.log(0)


def test_modulo_gf2():
    assert modulo_gf2(0b101, 0b1011) == 0b101
    assert modulo_gf2(0b1011, 0b1011) == 0
    assert modulo_gf2(0b1011 << 5, 0b1011) == 0
    assert modulo_gf2((0b1011 << 5) ^ 0b11, 0b1011) == 0b11


def test_generator_polynomials():
    assert [GF256.log(c) for c in generator_polynomials[7]] == \
        [0, 87, 229, 146, 149, 238, 102, 21]
    assert [GF256.log(c) for c in generator_polynomials[10]] == \
        [0, 251, 67, 46, 61, 118, 70, 64, 94, 32, 45]
    for degree in range(1, 31):
        assert len(generator_polynomials[degree]) == degree + 1
        assert generator_polynomials[degree][0] == 1


def test_generator_is_product_of_roots():
    g = [1]
    for i in range(13):
        g = GF256.poly_mul(g, [1, GF256.exp(i)])
    assert bytes(g) == generator_polynomials[13]


def test_zero_message():
    rse = ReedSolomonEncoder(10)
    assert rse.encode_block(bytes(16)) == bytes(10)


def test_version_1m_hello_world():
    data = bytes([32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17,
                  236, 17, 236, 17])
    rse = ReedSolomonEncoder(10)
    assert rse.encode_block(data) == \
        bytes([196, 35, 39, 119, 235, 215, 231, 226, 93, 23])


def test_version_5q_blocks():
    blocks = [
        [67, 85, 70, 134, 87, 38, 85, 194, 119, 50, 6, 18, 6, 103, 38],
        [246, 246, 66, 7, 118, 134, 242, 7, 38, 86, 22, 198, 199, 146, 6],
        [182, 230, 247, 119, 50, 7, 118, 134, 87, 38, 82, 6, 134, 151, 50,
         7],
        [70, 247, 118, 86, 194, 6, 151, 50, 16, 236, 17, 236, 17, 236, 17,
         236]
    ]
    expected = [
        [213, 199, 11, 45, 115, 247, 241, 223, 229, 248, 154, 117, 154,
         111, 86, 161, 111, 39],
        [87, 204, 96, 60, 202, 182, 124, 157, 200, 134, 27, 129, 209, 17,
         163, 163, 120, 133],
        [148, 116, 177, 212, 76, 133, 75, 242, 238, 76, 195, 230, 189, 10,
         108, 240, 192, 141],
        [235, 159, 5, 173, 24, 147, 59, 33, 106, 40, 255, 172, 82, 2, 131,
         32, 178, 236]
    ]
    rse = ReedSolomonEncoder(18)
    for block, ec in zip(blocks, expected):
        assert rse.encode_block(bytes(block)) == bytes(ec)


def test_syndromes():
    rse = ReedSolomonEncoder(22)
    data = bytes(range(40, 80))
    codeword = data + rse.encode_block(data)
    assert rse.syndromes(codeword) == [0] * 22
    damaged = bytes([codeword[0] ^ 0x5a]) + codeword[1:]
    assert any(rse.syndromes(damaged))


def test_invalid_parameters():
    with pytest.raises(ValueError):
        ReedSolomonEncoder(0)
    with pytest.raises(ValueError):
        ReedSolomonEncoder(31)
    with pytest.raises(TypeError):
        ReedSolomonEncoder(7).encode_block([1, 2, 3])
