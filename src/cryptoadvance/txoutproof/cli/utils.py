import binascii
import logging

import click

from ..txoutproof_error import MalformedArgument

logger = logging.getLogger(__name__)


class Echo:
    def __init__(self, quiet):
        self.quiet = quiet

    def echo(self, mystring, **kwargs):
        if self.quiet:
            pass
        else:
            click.echo(f"{mystring}", **kwargs)


def setup_logging(debug=False, logformat=None):
    """Logs to stderr, stdout is reserved for the DOT output"""
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG)
    ca_logger = logging.getLogger("cryptoadvance")
    if debug:
        # No need for timestamps while developing
        formatter = logging.Formatter("[%(levelname)7s] in %(module)15s: %(message)s")
        ca_logger.setLevel(logging.DEBUG)
    else:
        formatter = logging.Formatter(
            logformat or "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"
        )
        ca_logger.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    ca_logger.handlers = []
    ca_logger.addHandler(ch)
    logger.debug("We're now on level DEBUG on logger cryptoadvance")


def parse_hex(hex_strings):
    """Expects exactly one hex string (case insensitive, even length) and
    returns its bytes"""
    if len(hex_strings) != 1:
        raise MalformedArgument(
            f"Please provide exactly one hexadecimal string argument (got {len(hex_strings)})"
        )
    try:
        return binascii.unhexlify(hex_strings[0])
    except ValueError as e:
        raise MalformedArgument(f"Failed to convert hexadecimal string: {e}")
