# Parsing layout adopted from https://github.com/jimmysong/pb-exercises/
import logging
from io import BytesIO

from embit import compact
from embit.hashes import double_sha256

from .merkle_tree import build_partial_merkle_tree
from .txoutproof_error import EmptyProofBody, TruncatedInput, TxOutProofError
from .util.encoding import (
    bit_field_to_bytes,
    bytes_to_bit_field,
    hash_to_hex,
    int_to_little_endian,
    little_endian_to_int,
    read_exact,
    read_varint,
)

logger = logging.getLogger(__name__)

HEADER_SIZE = 80
HASH_SIZE = 32


class BlockHeader:
    """The fixed 80 byte block header. Hashes are kept in the raw (wire) order,
    use prev_block_hex and merkle_root_hex for the usual reversed display.
    """

    def __init__(self, version, prev_block, merkle_root, timestamp, bits, nonce):
        self._version = version
        self._prev_block = bytes(prev_block)
        self._merkle_root = bytes(merkle_root)
        self._timestamp = timestamp
        self._bits = bits
        self._nonce = nonce

    @property
    def version(self):
        return self._version

    @property
    def prev_block(self):
        return self._prev_block

    @property
    def merkle_root(self):
        return self._merkle_root

    @property
    def timestamp(self):
        return self._timestamp

    @property
    def bits(self):
        return self._bits

    @property
    def nonce(self):
        return self._nonce

    @property
    def prev_block_hex(self):
        return hash_to_hex(self._prev_block)

    @property
    def merkle_root_hex(self):
        return hash_to_hex(self._merkle_root)

    def __eq__(self, other):
        if not isinstance(other, BlockHeader):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self):
        return f"BlockHeader({self.id()})"

    @classmethod
    def parse(cls, s):
        """Takes a byte stream and parses a block header. Returns a BlockHeader object"""
        # version - 4 bytes, little endian, signed
        version = little_endian_to_int(read_exact(s, 4, "version"), signed=True)
        # prev_block - 32 bytes, raw order
        prev_block = read_exact(s, HASH_SIZE, "prev_block")
        # merkle_root - 32 bytes, raw order
        merkle_root = read_exact(s, HASH_SIZE, "merkle_root")
        # timestamp, bits and nonce - 4 bytes each, little endian
        timestamp = little_endian_to_int(read_exact(s, 4, "timestamp"))
        bits = little_endian_to_int(read_exact(s, 4, "bits"))
        nonce = little_endian_to_int(read_exact(s, 4, "nonce"))
        return cls(version, prev_block, merkle_root, timestamp, bits, nonce)

    def serialize(self):
        """Returns the 80 byte block header"""
        result = int_to_little_endian(self._version, 4, signed=True)
        result += self._prev_block
        result += self._merkle_root
        result += int_to_little_endian(self._timestamp, 4)
        result += int_to_little_endian(self._bits, 4)
        result += int_to_little_endian(self._nonce, 4)
        return result

    def hash(self):
        """Returns the double sha256 of the header in display order"""
        return double_sha256(self.serialize())[::-1]

    def id(self):
        """Human-readable hexadecimal of the block hash"""
        return self.hash().hex()


class MerkleProofBody:
    """Everything after the header: the transaction count, the hashes and the
    flag bytes of a BIP37 merkleblock. flags holds the unpacked bits.
    """

    def __init__(self, total_transactions, hashes, flag_bytes):
        self.total_transactions = total_transactions
        self.hashes = [bytes(h) for h in hashes]
        self.flag_bytes = bytes(flag_bytes)
        self.flags = bytes_to_bit_field(self.flag_bytes)

    def __repr__(self):
        return (
            f"MerkleProofBody(total={self.total_transactions}, "
            f"hashes={len(self.hashes)}, flags={self.flag_bytes.hex()})"
        )

    @classmethod
    def from_flags(cls, total_transactions, hashes, flags):
        return cls(total_transactions, hashes, bit_field_to_bytes(flags))

    @classmethod
    def parse(cls, s):
        total = little_endian_to_int(read_exact(s, 4, "total_transactions"))
        num_hashes = read_varint(s, "hash_count")
        hashes = []
        for i in range(num_hashes):
            hashes.append(read_exact(s, HASH_SIZE, f"hash #{i + 1}"))
        flags_length = read_varint(s, "flag_byte_count")
        flag_bytes = read_exact(s, flags_length, "flags")
        return cls(total, hashes, flag_bytes)

    def serialize(self):
        result = int_to_little_endian(self.total_transactions, 4)
        result += compact.to_bytes(len(self.hashes))
        for h in self.hashes:
            result += h
        result += compact.to_bytes(len(self.flag_bytes))
        result += self.flag_bytes
        return result


class TxOutProof:
    """A decoded proof as returned by bitcoind's gettxoutproof: header and body"""

    def __init__(self, header, body):
        self.header = header
        self.body = body

    @property
    def total_transactions(self):
        return self.body.total_transactions

    @property
    def hashes(self):
        return self.body.hashes

    @property
    def flags(self):
        return self.body.flags

    def hash(self):
        return self.header.hash()

    def id(self):
        return self.header.id()

    @classmethod
    def parse(cls, s):
        """Takes a byte stream and parses a complete proof. Returns a TxOutProof object"""
        header = BlockHeader.parse(s)
        # peek for the body, an empty body is its own error
        if s.read(1) == b"":
            raise EmptyProofBody()
        s.seek(-1, 1)
        return cls(header, MerkleProofBody.parse(s))

    def serialize(self):
        return self.header.serialize() + self.body.serialize()

    def build_tree(self, strategy=None):
        """Reconstructs the partial merkle tree from this proof's flags and hashes"""
        return build_partial_merkle_tree(
            self.flags, self.hashes, self.total_transactions, strategy=strategy
        )


def decode_txoutproof(data):
    """Decodes a serialized proof (80 byte header followed by the merkleblock body)"""
    if len(data) < HEADER_SIZE:
        raise TruncatedInput("block_header", HEADER_SIZE, len(data))
    return TxOutProof.parse(BytesIO(data))


def is_valid_merkle_proof(
    proof_hex, target_merkle_root_hex=None, target_tx_hex=None, strategy=None
):
    """
    Validate that a BIP37 merkle `proof` is well-formed and its root matches the
    root in its header and, if passed, `target_merkle_root_hex`. If `target_tx_hex`
    is passed, it has to be one of the matched transactions.
    All hex values are in display order. strategy is passed on to build_tree.
    """
    try:
        proof = decode_txoutproof(bytes.fromhex(proof_hex))
        tree = proof.build_tree(strategy=strategy)
    except (TxOutProofError, ValueError) as e:
        logger.debug(f"Invalid merkle proof: {e}")
        return False

    if not tree.matches_root(proof.header.merkle_root):
        return False

    if target_merkle_root_hex is not None:
        if tree.root_hex != target_merkle_root_hex.lower():
            return False

    if target_tx_hex is not None:
        if target_tx_hex.lower() not in tree.matched_txids():
            return False

    return True
