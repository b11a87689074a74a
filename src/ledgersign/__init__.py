"""
ledgersign

Final-stage assembly of ledger transactions: canonical signed bytes,
transaction hashes and canonically ordered multi-signed transactions.
"""

__version__ = "0.1.0"

from ledgersign.codec.interface import (
    AddressCodec,
    AddressFormatError,
    BinaryCodec,
    EncodingError,
)
from ledgersign.core.signature import SignatureWithPublicKey, SignerEntry
from ledgersign.core.transaction import Transaction
from ledgersign.tx.hashing import transaction_hash
from ledgersign.tx.multisign import (
    DuplicateSignerError,
    EmptySignatureSetError,
    MultiSignedTransaction,
)
from ledgersign.tx.signed import SignedTransaction, SingleSignedTransaction

__all__ = [
    "AddressCodec",
    "AddressFormatError",
    "BinaryCodec",
    "EncodingError",
    "SignatureWithPublicKey",
    "SignerEntry",
    "Transaction",
    "transaction_hash",
    "DuplicateSignerError",
    "EmptySignatureSetError",
    "MultiSignedTransaction",
    "SignedTransaction",
    "SingleSignedTransaction",
]
