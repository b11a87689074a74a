"""
Core value types.

Transactions and the signature material attached to them.
"""

from ledgersign.core.signature import SignatureWithPublicKey, SignerEntry
from ledgersign.core.transaction import Transaction

__all__ = [
    "SignatureWithPublicKey",
    "SignerEntry",
    "Transaction",
]
