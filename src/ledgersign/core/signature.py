"""
Signature material models.

A signature is produced elsewhere; these types only carry it, together with
the public key that produced it, into a transaction's signer list.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class SignatureWithPublicKey:
    """
    A transaction signature paired with the public key that produced it.
    
    Instances compare and hash by value, so a set of them never holds the
    same (public key, signature) pair twice.
    
    Attributes:
        public_key: Signer's public key (33 bytes for ledger keys)
        signature: Signature over the signing data
    """
    
    public_key: bytes
    signature: bytes
    
    def __post_init__(self):
        """Normalize bytes-like inputs to immutable bytes."""
        object.__setattr__(self, "public_key", bytes(self.public_key))
        object.__setattr__(self, "signature", bytes(self.signature))
    
    @classmethod
    def from_hex(cls, public_key: str, signature: str) -> "SignatureWithPublicKey":
        """
        Create from hex strings (either case).
        
        Args:
            public_key: Hex-encoded public key
            signature: Hex-encoded signature
            
        Returns:
            New SignatureWithPublicKey instance
        """
        return cls(
            public_key=bytes.fromhex(public_key),
            signature=bytes.fromhex(signature),
        )
    
    @property
    def public_key_hex(self) -> str:
        """Public key in canonical uppercase hex."""
        return self.public_key.hex().upper()
    
    @property
    def signature_hex(self) -> str:
        """Signature in canonical uppercase hex."""
        return self.signature.hex().upper()


@dataclass(frozen=True)
class SignerEntry:
    """
    One entry of a multi-signed transaction's signer list.
    
    Attributes:
        account: Address derived from the signer's public key
        public_key: Signer's public key
        signature: Signer's transaction signature
    """
    
    account: str
    public_key: bytes
    signature: bytes
    
    @classmethod
    def from_signature(cls, account: str, signature: SignatureWithPublicKey) -> "SignerEntry":
        """Build an entry for a signature whose account is already derived."""
        return cls(
            account=account,
            public_key=signature.public_key,
            signature=signature.signature,
        )
    
    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Render as the wrapped Signer object of the Signers field."""
        return {
            "Signer": {
                "Account": self.account,
                "SigningPubKey": self.public_key.hex().upper(),
                "TxnSignature": self.signature.hex().upper(),
            }
        }
