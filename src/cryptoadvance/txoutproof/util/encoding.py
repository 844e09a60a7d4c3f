# Helpers adopted from https://github.com/jimmysong/pb-exercises/
import logging

from ..txoutproof_error import TruncatedInput

logger = logging.getLogger(__name__)


def little_endian_to_int(b, signed=False):
    """little_endian_to_int takes byte sequence as a little-endian number.
    Returns an integer"""
    return int.from_bytes(b, "little", signed=signed)


def int_to_little_endian(n, length, signed=False):
    """int_to_little_endian takes an integer and returns the little-endian
    byte sequence of length"""
    return n.to_bytes(length, "little", signed=signed)


def read_exact(s, length, field):
    """Reads exactly length bytes from the stream s or raises TruncatedInput
    naming the field which was being read"""
    data = s.read(length)
    if len(data) != length:
        raise TruncatedInput(field, length, len(data))
    return data


def read_varint(s, field="varint"):
    """read_varint reads a CompactSize unsigned integer from a stream"""
    i = read_exact(s, 1, field)[0]
    if i == 0xFD:
        # 0xfd means the next two bytes are the number
        return little_endian_to_int(read_exact(s, 2, field))
    elif i == 0xFE:
        # 0xfe means the next four bytes are the number
        return little_endian_to_int(read_exact(s, 4, field))
    elif i == 0xFF:
        # 0xff means the next eight bytes are the number
        return little_endian_to_int(read_exact(s, 8, field))
    else:
        # anything else is just the integer
        return i


def bytes_to_bit_field(some_bytes):
    """Unpacks the flag bytes LSB first, bit i of byte b ends up at index 8b+i"""
    flag_bits = []
    for byte in some_bytes:
        for _ in range(8):
            flag_bits.append(bool(byte & 1))
            byte >>= 1
    return flag_bits


def bit_field_to_bytes(bit_field):
    """Packs flag bits LSB first, the last byte is padded with zeros"""
    result = bytearray((len(bit_field) + 7) // 8)
    for i, bit in enumerate(bit_field):
        if bit:
            result[i // 8] |= 1 << (i % 8)
    return bytes(result)


def hash_to_hex(h):
    """Bitcoin hashes are stored little endian but displayed reversed"""
    return h[::-1].hex()


def hex_to_hash(hex_str):
    """Inverse of hash_to_hex, takes a display order hex string"""
    return bytes.fromhex(hex_str)[::-1]
