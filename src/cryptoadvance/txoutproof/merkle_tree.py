import logging

from embit.hashes import double_sha256

from .txoutproof_error import (
    FlagStreamExhausted,
    HashStreamExhausted,
    IncompleteProof,
    MalformedProof,
    TrailingProofData,
    TxOutProofError,
)
from .util.encoding import hash_to_hex

logger = logging.getLogger(__name__)

# Every branch may go down to the full height, only flags mark leaves early
FULL_HEIGHT = "full-height"
# Levels are as wide as the transaction count allows, a missing right
# sibling is replaced by its left sibling (as bitcoind does it)
BIP37 = "bip37"
STRATEGIES = (FULL_HEIGHT, BIP37)


def merkle_parent(hash1, hash2):
    """Takes the binary hashes and calculates the double-sha256"""
    return double_sha256(hash1 + hash2)


def tree_height(total_transactions):
    """The minimal height h with 2**h >= total_transactions"""
    height = 0
    while (1 << height) < total_transactions:
        height += 1
    return height


class MerkleNode:
    """A node of the partial merkle tree.
    parent is only used to walk upwards, children are owned by their parent.
    """

    def __init__(self, parent=None, depth=0, position=0):
        self.hash = None
        self.parent = parent
        self.left = None
        self.right = None
        self.depth = depth
        self.position = position
        self.matched = False

    def __repr__(self):
        short = "None" if self.hash is None else f"{self.hex[:8]}..."
        return f"MerkleNode({self.node_id}, {short})"

    @property
    def node_id(self):
        return f"node_{self.depth}_{self.position}"

    @property
    def hex(self):
        if self.hash is None:
            return None
        return hash_to_hex(self.hash)

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    @property
    def is_root(self):
        return self.parent is None

    def set_hash(self, value):
        if self.hash is not None:
            raise RuntimeError(f"Hash of {self.node_id} is already set")
        self.hash = bytes(value)


class PartialMerkleTree:
    """Rebuilds a BIP37 partial merkle tree from flag bits and hashes.

    The tree is walked depth first without recursion, the parent links are
    used to go back up. Flags and hashes are consumed in lockstep:

        tree = PartialMerkleTree(total_transactions)
        tree.populate_tree(flags, hashes)
        tree.root_hex  # the calculated merkle root in display order

    Every inconsistency between the two streams raises a MalformedProof.
    """

    def __init__(self, total_transactions, strategy=FULL_HEIGHT):
        if strategy not in STRATEGIES:
            raise TxOutProofError(
                f"Unknown strategy {strategy}, use one of {', '.join(STRATEGIES)}"
            )
        if total_transactions < 1:
            raise MalformedProof("A merkle proof needs at least one transaction")
        self.total = total_transactions
        self.strategy = strategy
        self.height = tree_height(total_transactions)
        self.root = None
        # all nodes in the order they got created
        self.nodes = []
        self.flags_used = 0
        self.hashes_used = 0

    def __repr__(self):
        result = []
        for depth in range(self.height + 1):
            items = []
            for node in self.nodes:
                if node.depth != depth:
                    continue
                if node.hash is None:
                    items.append("None")
                else:
                    items.append("{}...".format(node.hex[:8]))
            result.append(", ".join(items))
        return "\n".join(result)

    def level_width(self, depth):
        """The number of nodes at depth, ceil(total / 2**(height - depth))"""
        shift = self.height - depth
        return (self.total + (1 << shift) - 1) >> shift

    def right_exists(self, node):
        if self.strategy == FULL_HEIGHT:
            return True
        return node.position * 2 + 1 < self.level_width(node.depth + 1)

    def _add_child(self, parent, right=False):
        node = MerkleNode(
            parent=parent,
            depth=parent.depth + 1,
            position=parent.position * 2 + (1 if right else 0),
        )
        if right:
            parent.right = node
        else:
            parent.left = node
        self.nodes.append(node)
        return node

    def populate_tree(self, flags, hashes):
        if self.root is not None:
            raise RuntimeError("Tree is already populated")
        flags = list(flags)
        hashes = list(hashes)
        self.root = MerkleNode()
        self.nodes.append(self.root)
        current = self.root
        while True:
            # we only come back to a node after its children are finished
            if current.left is not None and (
                current.right is not None or not self.right_exists(current)
            ):
                if current.hash is None:
                    if current.right is not None:
                        right_hash = current.right.hash
                    else:
                        right_hash = current.left.hash
                    current.set_hash(merkle_parent(current.left.hash, right_hash))
                if current.is_root:
                    break
                current = current.parent
                continue

            if current.left is not None:
                current = self._add_child(current, right=True)
                continue

            if self.flags_used >= len(flags):
                if self.hashes_used == len(hashes):
                    raise IncompleteProof(self.hashes_used, len(self.nodes))
                raise FlagStreamExhausted(self.flags_used, len(flags))
            flag = bool(flags[self.flags_used])
            self.flags_used += 1

            if not flag or current.depth == self.height:
                if self.hashes_used >= len(hashes):
                    raise HashStreamExhausted(self.hashes_used, len(hashes))
                current.set_hash(hashes[self.hashes_used])
                self.hashes_used += 1
                current.matched = flag and current.depth == self.height
                if current.is_root:
                    break
                current = current.parent
            else:
                current = self._add_child(current)

        if self.hashes_used != len(hashes):
            raise TrailingProofData("hashes", len(hashes) - self.hashes_used)
        # padding bits of the last flag byte are fine
        if (self.flags_used + 7) // 8 != (len(flags) + 7) // 8:
            raise TrailingProofData("flags", len(flags) - self.flags_used)
        logger.debug(
            f"Rebuilt {self.strategy} tree of height {self.height} with {len(self.nodes)} nodes, "
            f"{self.flags_used} flags and {self.hashes_used} hashes"
        )

    @property
    def root_hash(self):
        if self.root is None:
            return None
        return self.root.hash

    @property
    def root_hex(self):
        if self.root is None:
            return None
        return self.root.hex

    @property
    def leaves(self):
        return [node for node in self.nodes if node.is_leaf]

    @property
    def matched_leaves(self):
        return [node for node in self.nodes if node.matched]

    def matched_txids(self):
        """The txids of the matched transactions in display order"""
        return [node.hex for node in self.matched_leaves]

    def find(self, node_id):
        for node in self.nodes:
            if node.node_id == node_id:
                return node
        return None

    def matches_root(self, merkle_root):
        """Compares with a raw (not reversed) merkle root, e.g. the one from the header"""
        return self.root_hash is not None and self.root_hash == bytes(merkle_root)


def build_partial_merkle_tree(flags, hashes, total_transactions, strategy=None):
    """Builds the partial merkle tree and returns it, raises a MalformedProof if
    flags and hashes don't form a complete tree"""
    tree = PartialMerkleTree(total_transactions, strategy=strategy or FULL_HEIGHT)
    tree.populate_tree(flags, hashes)
    return tree
