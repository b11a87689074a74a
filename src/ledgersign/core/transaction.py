"""
Transaction value type.

Holds a ledger transaction as an immutable mapping of its JSON fields.
Field modelling and validation belong to the caller; this type only knows
how to attach signature material and how to render canonical JSON text
for the binary codec.
"""

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ledgersign.core.signature import SignerEntry

SIGNERS_FIELD = "Signers"
SIGNING_PUB_KEY_FIELD = "SigningPubKey"
TXN_SIGNATURE_FIELD = "TxnSignature"


def _freeze(value: Any) -> Any:
    """Recursively copy JSON containers into read-only mappings and tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    """Recursively copy frozen containers back into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class Transaction:
    """
    An immutable ledger transaction.
    
    Nested containers are frozen on construction, so neither the caller's
    source data nor the values handed out can change the transaction.
    Every "with_*" method returns a new Transaction and leaves the receiver
    untouched.
    
    Attributes:
        fields: Read-only view of the transaction's JSON fields
    """
    
    fields: Mapping[str, Any] = field(default_factory=dict)
    
    def __post_init__(self):
        """Freeze a private deep copy of the supplied fields."""
        object.__setattr__(self, "fields", _freeze(self.fields))
    
    def __hash__(self):
        return hash(self.to_json())
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        """Create a Transaction from a JSON-style dictionary."""
        return cls(fields=data)
    
    @classmethod
    def from_json(cls, text: str) -> "Transaction":
        """Create a Transaction from JSON text."""
        return cls(fields=json.loads(text))
    
    @property
    def transaction_type(self) -> Optional[str]:
        """The TransactionType field, if present."""
        return self.fields.get("TransactionType")
    
    @property
    def signers(self) -> List[Dict[str, Any]]:
        """The attached signer list (empty when not multi-signed)."""
        return _thaw(self.fields.get(SIGNERS_FIELD, ()))
    
    @property
    def is_signed(self) -> bool:
        """Check if any signature material is attached."""
        return bool(self.fields.get(TXN_SIGNATURE_FIELD)) or bool(self.fields.get(SIGNERS_FIELD))
    
    def with_signers(self, entries: Iterable[SignerEntry]) -> "Transaction":
        """
        Attach a signer list, keeping the given order.
        
        Args:
            entries: Signer entries, already in canonical order
            
        Returns:
            New transaction with the Signers field set
        """
        updated = dict(self.fields)
        updated[SIGNERS_FIELD] = [entry.to_dict() for entry in entries]
        return Transaction(fields=updated)
    
    def with_signature(self, public_key_hex: str, signature_hex: str) -> "Transaction":
        """
        Attach a single signer's public key and signature.
        
        Args:
            public_key_hex: Signer's public key in hex
            signature_hex: Transaction signature in hex
            
        Returns:
            New transaction with SigningPubKey and TxnSignature set
        """
        updated = dict(self.fields)
        updated[SIGNING_PUB_KEY_FIELD] = public_key_hex
        updated[TXN_SIGNATURE_FIELD] = signature_hex
        return Transaction(fields=updated)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain, mutable copy of the fields."""
        return _thaw(self.fields)
    
    def to_json(self) -> str:
        """
        Render canonical JSON text.
        
        Keys are sorted and separators are compact so that equal transactions
        always produce identical text.
        """
        return json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
