""" A config module contains static configuration """
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Loading env-vars from a .env in the current working directory
load_dotenv(Path(".") / ".env")

logger = logging.getLogger(__name__)


def _get_bool_env_var(varname, default=None):

    value = os.environ.get(varname, default)

    if value is None:
        return False
    elif isinstance(value, str) and value.lower() == "false":
        return False
    elif bool(value) is False:
        return False
    else:
        return bool(value)


DEFAULT_CONFIG = "cryptoadvance.txoutproof.config.BaseConfig"


class BaseConfig(object):
    LOGFORMAT = os.getenv(
        "TXOUTPROOF_LOGFORMAT", "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"
    )
    DEBUG = _get_bool_env_var("TXOUTPROOF_DEBUG", "False")

    # "full-height" or "bip37", see merkle_tree.STRATEGIES
    DEFAULT_STRATEGY = os.getenv("TXOUTPROOF_STRATEGY", "full-height")

    # Graphviz output
    GRAPH_NAME = os.getenv("TXOUTPROOF_GRAPH_NAME", "G")
    # How many hex-chars of a hash are shown for all nodes except the root
    LABEL_HASH_CHARS = os.getenv("TXOUTPROOF_LABEL_HASH_CHARS", "8")
    # default color of pruned branches
    LEAF_FILLCOLOR = "lightblue"
    # color of the transactions which matched the filter
    MATCHED_LEAF_FILLCOLOR = "lightcoral"
    INTERNAL_FILLCOLOR = "white"

    @classmethod
    def label_hash_chars(cls):
        try:
            return int(cls.LABEL_HASH_CHARS)
        except (TypeError, ValueError):
            logger.warning(
                f"LABEL_HASH_CHARS has to be a number, not {cls.LABEL_HASH_CHARS!r}, using 8"
            )
            return 8


class DevelopmentConfig(BaseConfig):
    # No need for timestamps while developing
    LOGFORMAT = "[%(levelname)7s] in %(module)15s: %(message)s"
    DEBUG = True


class TestConfig(BaseConfig):
    DEFAULT_STRATEGY = "full-height"
    LABEL_HASH_CHARS = 8
