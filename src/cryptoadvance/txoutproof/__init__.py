""" Decodes bitcoind's gettxoutproof output and rebuilds its BIP37 partial merkle tree """
from .merkle_tree import MerkleNode, PartialMerkleTree, build_partial_merkle_tree
from .merkleblock import BlockHeader, MerkleProofBody, TxOutProof, decode_txoutproof

__version__ = "0.1.0"
