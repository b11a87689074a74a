"""
Signed transactions.

Pairs an unsigned transaction with its signed counterpart and derives the
submission blob and transaction hash from the signed side. Nothing is
cached: both are recomputed from the immutable signed transaction on every
call.
"""

import binascii
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import structlog

from ledgersign.codec.interface import BinaryCodec, EncodingError
from ledgersign.core.signature import SignatureWithPublicKey
from ledgersign.core.transaction import Transaction
from ledgersign.tx.hashing import transaction_hash

logger = structlog.get_logger(__name__)


def encode_transaction(transaction: Transaction, binary_codec: BinaryCodec) -> bytes:
    """
    Encode a transaction into its canonical bytes.
    
    Args:
        transaction: Transaction to encode
        binary_codec: Codec producing the canonical hex encoding
        
    Returns:
        Canonical transaction bytes
        
    Raises:
        EncodingError: If the codec fails or returns something other than hex
    """
    encoded = binary_codec.encode(transaction.to_json())
    if not isinstance(encoded, str):
        raise EncodingError(f"Binary codec returned {type(encoded).__name__}, expected hex string")
    try:
        return binascii.unhexlify(encoded)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Binary codec returned invalid hex: {e}") from e


@dataclass(frozen=True)
class SignedTransaction:
    """
    An unsigned transaction together with its signed form.
    
    The signed transaction differs from the unsigned one only by the
    attached signature material.
    
    Attributes:
        unsigned: The transaction before signing
        signed: The transaction with signature material attached
        binary_codec: Codec used to derive the canonical bytes
    """
    
    unsigned: Transaction
    signed: Transaction
    binary_codec: BinaryCodec = field(compare=False, repr=False)
    
    def signed_transaction_bytes(self) -> bytes:
        """Canonical bytes of the signed transaction, ready for submission."""
        return encode_transaction(self.signed, self.binary_codec)
    
    def signed_transaction_blob(self) -> str:
        """Canonical bytes of the signed transaction as uppercase hex."""
        return self.signed_transaction_bytes().hex().upper()
    
    def hash(self) -> str:
        """
        Transaction ID of the signed transaction.
        
        Usable as a handle before the transaction is submitted.
        """
        return transaction_hash(self.signed_transaction_bytes())
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        signed_bytes = self.signed_transaction_bytes()
        return {
            "tx_blob": signed_bytes.hex().upper(),
            "hash": transaction_hash(signed_bytes),
            "tx_json": self.signed.to_dict(),
        }


@dataclass(frozen=True)
class SingleSignedTransaction(SignedTransaction):
    """
    A transaction signed by exactly one key.
    
    Attributes:
        signature: The signature and public key attached to the transaction
    """
    
    signature: Optional[SignatureWithPublicKey] = None
    
    @classmethod
    def create(
        cls,
        unsigned: Transaction,
        signature: SignatureWithPublicKey,
        binary_codec: BinaryCodec,
    ) -> "SingleSignedTransaction":
        """
        Attach a single signature to an unsigned transaction.
        
        Args:
            unsigned: Transaction to sign
            signature: Signature material produced for the transaction
            binary_codec: Codec used to derive the canonical bytes
            
        Returns:
            New SingleSignedTransaction
        """
        signed = unsigned.with_signature(signature.public_key_hex, signature.signature_hex)
        logger.debug("single_signature_attached", public_key=signature.public_key_hex[:16] + "...")
        return cls(
            unsigned=unsigned,
            signed=signed,
            binary_codec=binary_codec,
            signature=signature,
        )
