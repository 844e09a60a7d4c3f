import logging

logger = logging.getLogger(__name__)


class TxOutProofError(Exception):
    """A TxOutProofError contains meaningfull messages which can be passed directly to the user"""

    def __init__(self, message):
        super(TxOutProofError, self).__init__(message)


class MalformedArgument(TxOutProofError):
    """The command line input could not be turned into proof bytes
    (wrong number of arguments, odd length or non-hex characters)
    """

    pass


class TruncatedInput(TxOutProofError):
    """The byte buffer ended before a field could be read completely.
    Carries which field was being read and how many bytes were expected
    vs. available:
        try:
            decode_txoutproof(data)
        except TruncatedInput as ti:
            print(ti.field, ti.expected, ti.available)
    """

    def __init__(self, field, expected, available):
        super(TruncatedInput, self).__init__(
            f"Truncated input while reading {field}: expected {expected} bytes, got {available}"
        )
        self.field = field
        self.expected = expected
        self.available = available


class EmptyProofBody(TxOutProofError):
    def __init__(self, message="No additional data found after block header"):
        super(EmptyProofBody, self).__init__(message)


class MalformedProof(TxOutProofError):
    """Base class for all errors raised while rebuilding the partial merkle tree"""

    pass


class FlagStreamExhausted(MalformedProof):
    def __init__(self, flags_used, flags_available):
        super(FlagStreamExhausted, self).__init__(
            f"Ran out of flags, flag bits are too short: needed more than {flags_used} of {flags_available} bits"
        )
        self.flags_used = flags_used
        self.flags_available = flags_available


class HashStreamExhausted(MalformedProof):
    def __init__(self, hashes_used, hashes_available):
        super(HashStreamExhausted, self).__init__(
            f"Ran out of hashes, proof is malformed: needed more than {hashes_used} of {hashes_available} hashes"
        )
        self.hashes_used = hashes_used
        self.hashes_available = hashes_available


class IncompleteProof(MalformedProof):
    def __init__(self, hashes_used, nodes_built):
        super(IncompleteProof, self).__init__(
            f"All {hashes_used} hashes are parsed, but tree construction is not finished ({nodes_built} nodes built)"
        )
        self.hashes_used = hashes_used
        self.nodes_built = nodes_built


class TrailingProofData(MalformedProof):
    """The tree was completed but one of the input streams still has data left.
    stream is either "hashes" or "flags"
    """

    def __init__(self, stream, unused):
        super(TrailingProofData, self).__init__(
            f"Merkle root is complete but {unused} {stream} are not consumed"
        )
        self.stream = stream
        self.unused = unused


def handle_exception(exception):
    """prints the exception and most important the stacktrace"""
    logger.error("Unexpected error:")
    logger.error(
        "----START-TRACEBACK-----------------------------------------------------------------"
    )
    logger.exception(exception)  # the exception instance
    logger.error(
        "----END---TRACEBACK-----------------------------------------------------------------"
    )
