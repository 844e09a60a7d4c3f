import logging
import sys

import click

from ..config import DEFAULT_CONFIG
from ..dot import render_dot
from ..merkle_tree import STRATEGIES
from ..merkleblock import decode_txoutproof
from ..report import body_lines, header_lines, tree_lines
from ..txoutproof_error import (
    MalformedArgument,
    TxOutProofError,
    handle_exception,
)
from ..util.reflection import get_class
from .utils import Echo, parse_hex, setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option("--debug", is_flag=True, help="Show debug information on errors.")
@click.option(
    "--quiet/--no-quiet",
    default=False,
    help="Don't print the decoded fields as comments, only the graph.",
)
@click.option(
    "--strategy",
    type=click.Choice(STRATEGIES),
    default=None,
    help="full-height expands every branch down to the full height, bip37 stops at the width of each level and duplicates a missing right sibling. (Default from the config)",
)
@click.option(
    "--expected-root",
    "expected_root",
    default=None,
    help="A merkle root (display order) the calculated root is additionally compared with.",
)
@click.option(
    "--config",
    default=DEFAULT_CONFIG,
    help="A class from the config.py which sets reasonable default values.",
)
@click.argument("hex_strings", nargs=-1)
def entry_point(debug, quiet, strategy, expected_root, config, hex_strings):
    """Decodes the hex output of bitcoind's gettxoutproof (a block header followed
    by a BIP37 partial merkle tree), rebuilds the tree and prints it as a Graphviz
    DOT graph, e.g.:

        txoutproof <hex> | dot -Tpng -o tree.png
    """
    try:
        config_obj = get_class(config)
    except TxOutProofError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    setup_logging(debug or config_obj.DEBUG, config_obj.LOGFORMAT)
    echo = Echo(quiet).echo
    strategy = strategy or config_obj.DEFAULT_STRATEGY

    try:
        data = parse_hex(hex_strings)
        logger.debug(f"Decoding {len(data)} bytes")
        proof = decode_txoutproof(data)
    except MalformedArgument as e:
        click.echo(f"Error: {e}", err=True)
        click.echo("Usage: txoutproof [OPTIONS] <hex_string>", err=True)
        sys.exit(1)
    except TxOutProofError as e:
        click.echo(
            f"Error: Failed to decode transaction output proof data: {e}", err=True
        )
        sys.exit(1)
    except Exception as e:
        handle_exception(e)
        sys.exit(1)

    for line in header_lines(proof.header) + body_lines(proof.body):
        echo(line)

    try:
        tree = proof.build_tree(strategy=strategy)
    except TxOutProofError as e:
        click.echo(f"Error building Merkle tree: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        handle_exception(e)
        sys.exit(1)

    for line in tree_lines(tree, proof.header.merkle_root, expected_root):
        echo(line)
    if not tree.matches_root(proof.header.merkle_root):
        logger.warning(
            f"Calculated merkle root {tree.root_hex} does not match the block header's {proof.header.merkle_root_hex}"
        )
    if expected_root is not None and tree.root_hex != expected_root.lower():
        logger.warning(
            f"Calculated merkle root {tree.root_hex} does not match the expected {expected_root.lower()}"
        )

    click.echo(render_dot(tree, config_obj), nl=False)
