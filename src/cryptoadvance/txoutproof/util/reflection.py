import logging
from importlib import import_module

from ..txoutproof_error import TxOutProofError

logger = logging.getLogger(__name__)


def get_class(fqcn: str):
    """Returns a class by a fully qualified class name like e.g. cryptoadvance.txoutproof.config.TestConfig"""
    module_name = ".".join(fqcn.split(".")[:-1])

    class_name = fqcn.split(".")[-1]
    try:
        module = import_module(module_name)
        my_class = getattr(module, class_name)
    except (AttributeError, ModuleNotFoundError, ValueError) as e:
        raise TxOutProofError(f"Could not find {fqcn}: {e}")
    return my_class
