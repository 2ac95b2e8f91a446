from itertools import zip_longest

from .bitarray import BitArray
from .reedsolomon import ReedSolomonEncoder
from .tables import remainder_bits


def split_blocks(codewords, entry):
    """Splits data codewords into group 1 blocks followed by group 2
    blocks"""
    lengths = [entry.group1_data_codewords] * entry.group1_blocks
    lengths += [entry.group2_data_codewords] * entry.group2_blocks
    if sum(lengths) != len(codewords):
        raise ValueError(
            "Expected {} data codewords, got {}".format(
                sum(lengths), len(codewords)
            )
        )
    blocks = []
    start = 0
    for length in lengths:
        blocks.append(bytes(codewords[start:start + length]))
        start += length
    return blocks


def correction_encode(codewords, entry):
    rse = ReedSolomonEncoder(entry.ec_codewords_per_block)
    data_blocks = split_blocks(codewords, entry)
    ec_blocks = [rse.encode_block(block) for block in data_blocks]
    return (data_blocks, ec_blocks)


def blocks_iterator(blocks):
    for vals in zip_longest(*blocks):
        for val in vals:
            if val is not None:
                yield val


def interleave_blocks(blocks):
    return bytes(blocks_iterator(blocks))


def compose_message(data_blocks, ec_blocks, version):
    """Final bit sequence placed into the symbol: interleaved data,
    interleaved error correction and remainder bits"""
    message = interleave_blocks(data_blocks) + interleave_blocks(ec_blocks)
    bits = BitArray(message)
    bits.extend(0, remainder_bits[version - 1])
    return bits
