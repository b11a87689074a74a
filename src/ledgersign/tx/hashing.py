"""
Ledger hash derivation.

Ledger objects are identified by SHA-512 Half (the first 32 bytes of a
SHA-512 digest) over a 4-byte type prefix followed by the object's
canonical bytes. The prefix keeps hashes of different record types apart.
"""

import hashlib
from enum import Enum

import structlog

logger = structlog.get_logger(__name__)

HASH_LENGTH = 32


class HashPrefix(bytes, Enum):
    """4-byte domain-separation prefixes, three ASCII letters plus a zero byte."""
    TRANSACTION_ID = bytes.fromhex("54584E00")          # TXN
    TRANSACTION_NODE = bytes.fromhex("534E4400")        # SND
    LEAF_NODE = bytes.fromhex("4D4C4E00")               # MLN
    INNER_NODE = bytes.fromhex("4D494E00")              # MIN
    LEDGER_MASTER = bytes.fromhex("4C575200")           # LWR
    TRANSACTION_SIGN = bytes.fromhex("53545800")        # STX
    TRANSACTION_MULTISIGN = bytes.fromhex("534D5400")   # SMT


def sha512_half(data: bytes) -> bytes:
    """Return the first 32 bytes of the SHA-512 digest of data."""
    return hashlib.sha512(data).digest()[:HASH_LENGTH]


def prefixed_hash(prefix: HashPrefix, data: bytes) -> bytes:
    """
    Hash a record under its domain-separation prefix.
    
    Args:
        prefix: Record type prefix
        data: Canonical bytes of the record
        
    Returns:
        32-byte SHA-512 Half of prefix || data
    """
    return sha512_half(bytes(prefix) + bytes(data))


def transaction_hash(signed_transaction_bytes: bytes) -> str:
    """
    Compute the transaction ID for signed transaction bytes.
    
    Args:
        signed_transaction_bytes: Canonical encoding of a signed transaction
        
    Returns:
        64-character uppercase hex transaction hash
    """
    tx_hash = prefixed_hash(HashPrefix.TRANSACTION_ID, signed_transaction_bytes).hex().upper()
    logger.debug("transaction_hashed", tx_hash=tx_hash[:16] + "...", size=len(signed_transaction_bytes))
    return tx_hash
