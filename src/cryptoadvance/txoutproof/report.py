""" Human readable lines describing a decoded proof. All lines are DOT comments
so they can be printed in front of the graph.
"""
import logging
from datetime import datetime, timezone

from .util.encoding import hash_to_hex

logger = logging.getLogger(__name__)


def format_timestamp(timestamp):
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(
        "%Y-%m-%dT%H:%M:%SZ"
    )


def header_lines(header):
    return [
        "//Decoded Block Header (first 80 bytes):",
        f"//  Block Hash:      {header.id()}",
        f"//  Version:         {header.version} (0x{header.version & 0xFFFFFFFF:x})",
        f"//  Prev Block Hash: {header.prev_block_hex}",
        f"//  Merkle Root:     {header.merkle_root_hex}",
        f"//  Timestamp:       {header.timestamp} ({format_timestamp(header.timestamp)} UTC)",
        f"//  Bits (Target):   {header.bits} (0x{header.bits:x})",
        f"//  Nonce:           {header.nonce} (0x{header.nonce:x})",
    ]


def body_lines(body):
    lines = [
        "//Decoded Merkle Proof Data (following header):",
        f"//  Total Transactions: {body.total_transactions}",
        f"//  Hash Count (hash_num): {len(body.hashes)}",
        "//  Hashes:",
    ]
    for i, h in enumerate(body.hashes):
        lines.append(f"//    {i + 1}: {hash_to_hex(h)}")
    lines.append(f"//  Flag Bytes Count (vbits_num): {len(body.flag_bytes)}")
    lines.append(f"//  Flag Bits (vBits): {body.flag_bytes.hex()}")
    return lines


def tree_lines(tree, header_root, expected_root_hex=None):
    """Reports the calculated root and whether it matches the header's root
    (and the one passed by the caller, if any). A mismatch is only reported."""
    lines = [
        f"//Calculated Merkle Root: {tree.root_hex}",
        f"//  Strategy: {tree.strategy}, height {tree.height}, "
        f"{len(tree.nodes)} nodes, {tree.flags_used} flags and {tree.hashes_used} hashes used",
    ]
    for txid in tree.matched_txids():
        lines.append(f"//  Matched Transaction: {txid}")
    if tree.matches_root(header_root):
        lines.append("//  Merkle Root matches the block header")
    else:
        lines.append(
            f"//  WARNING: Merkle Root does not match the block header ({hash_to_hex(header_root)})"
        )
    if expected_root_hex is not None:
        if tree.root_hex == expected_root_hex.lower():
            lines.append("//  Merkle Root matches the expected root")
        else:
            lines.append(
                f"//  WARNING: Merkle Root does not match the expected root ({expected_root_hex.lower()})"
            )
    return lines
