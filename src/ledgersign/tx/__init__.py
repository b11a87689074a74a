"""
Transaction module.

Handles signed transaction bytes, transaction hashes and multi-signature assembly.
"""

from ledgersign.tx.hashing import HashPrefix, sha512_half, transaction_hash
from ledgersign.tx.multisign import (
    DuplicateSignerError,
    EmptySignatureSetError,
    MultiSignError,
    MultiSignedTransaction,
)
from ledgersign.tx.signed import SignedTransaction, SingleSignedTransaction

__all__ = [
    "HashPrefix",
    "sha512_half",
    "transaction_hash",
    "DuplicateSignerError",
    "EmptySignatureSetError",
    "MultiSignError",
    "MultiSignedTransaction",
    "SignedTransaction",
    "SingleSignedTransaction",
]
