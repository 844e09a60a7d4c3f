import hashlib
import logging

import pytest

logger = logging.getLogger(__name__)

# The genesis block with its single coinbase transaction as gettxoutproof would return it
GENESIS_HEADER_HEX = (
    "01000000"
    + "00" * 32
    + "3ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4a"
    + "29ab5f49"
    + "ffff001d"
    + "1dac2b7c"
)
GENESIS_TXID = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"
GENESIS_PROOF_HEX = (
    GENESIS_HEADER_HEX
    + "01000000"  # total transactions
    + "01"  # hash count
    + "3ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4a"
    + "01"  # flag byte count
    + "01"  # flags
)

# A merkleblock of a block with 3519 transactions, 10 hashes and the flags b55635
MERKLEBLOCK_HEX = "00000020df3b053dc46f162a9b00c7f0d5124e2676d47bbe7c5d0793a500000000000000ef445fef2ed495c275892206ca533e7411907971013ab83e3b47bd0d692d14d4dc7c835b67d8001ac157e670bf0d00000aba412a0d1480e370173072c9562becffe87aa661c1e4a6dbc305d38ec5dc088a7cf92e6458aca7b32edae818f9c2c98c37e06bf72ae0ce80649a38655ee1e27d34d9421d940b16732f24b94023e9d572a7f9ab8023434a4feb532d2adfc8c2c2158785d1bd04eb99df2e86c54bc13e139862897217400def5d72c280222c4cbaee7261831e1550dbb8fa82853e9fe506fc5fda3f7b919d8fe74b6282f92763cef8e625f977af7c8619c32a369b832bc2d051ecd9c73c51e76370ceabd4f25097c256597fa898d404ed53425de608ac6bfe426f6e2bb457f1c554866eb69dcb8d6bf6f880e9a59b3cd053e6c7060eeacaacf4dac6697dac20e4bd3f38a2ea2543d1ab7953e3430790a9f81e1c67f5b58c825acf46bd02848384eebe9af917274cdfbb1a28a5d58a23a17977def0de10d644258d9c54f886d47d293a411cb6226103b55635"
MERKLEBLOCK_MATCHED_TXID = (
    "6122b61c413a297dd486f8549c8d2544d610def0de7779a1238ad5a5281abbdf"
)


def dsha(data):
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


@pytest.fixture(autouse=True)
def reset_cryptoadvance_logger():
    """The cli installs its own handler on the cryptoadvance logger, get rid of it after each test"""
    yield
    ca_logger = logging.getLogger("cryptoadvance")
    ca_logger.handlers = []
    ca_logger.setLevel(logging.NOTSET)


@pytest.fixture
def genesis_proof_hex():
    return GENESIS_PROOF_HEX


@pytest.fixture
def merkleblock_hex():
    return MERKLEBLOCK_HEX


@pytest.fixture
def four_tx_proof():
    """A proof for the transaction at index 2 of a block with 4 transactions.
    Returns (flags, hashes, expected_root)
        root
        /   \\
      h01    n23
            /   \\
          h2*    h3
    """
    leaves = [bytes([i]) * 32 for i in range(4)]
    h01 = dsha(leaves[0] + leaves[1])
    h23 = dsha(leaves[2] + leaves[3])
    root = dsha(h01 + h23)
    flags = [1, 0, 1, 1, 0]
    hashes = [h01, leaves[2], leaves[3]]
    return flags, hashes, root
