"""
Multi-signed transaction assembly.

Combines signatures from several independent signers into one transaction.
The ledger only accepts a signer list sorted by account ID, read as an
unsigned big-endian integer, so the output order is always recomputed here
and never taken from the caller.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

import structlog

from ledgersign.codec.address import get_address_codec
from ledgersign.codec.interface import AddressCodec, BinaryCodec
from ledgersign.config import SigningConfig, get_config
from ledgersign.core.signature import SignatureWithPublicKey, SignerEntry
from ledgersign.core.transaction import Transaction
from ledgersign.tx.signed import SignedTransaction

logger = structlog.get_logger(__name__)


class MultiSignError(Exception):
    """Base class for rejected multi-signature inputs."""
    pass


class EmptySignatureSetError(MultiSignError):
    """Raised when aggregation is requested with no signatures."""
    pass


class DuplicateSignerError(MultiSignError):
    """Raised when two signatures resolve to the same account."""
    
    def __init__(self, account: str):
        super().__init__(f"More than one signature for account {account}")
        self.account = account


def sort_signer_entries(
    entries: Iterable[SignerEntry],
    address_codec: AddressCodec,
    allow_duplicates: bool = False,
) -> List[SignerEntry]:
    """
    Sort signer entries into canonical account ID order.
    
    Args:
        entries: Signer entries in any order
        address_codec: Codec used to decode each entry's account
        allow_duplicates: Keep entries sharing an account instead of rejecting them
        
    Returns:
        Entries sorted ascending by account ID
        
    Raises:
        DuplicateSignerError: If two entries share an account and duplicates are not allowed
    """
    keyed: List[Tuple[int, SignerEntry]] = []
    seen = set()
    
    for entry in entries:
        account_id = address_codec.decode_account_id(entry.account)
        sort_key = int.from_bytes(account_id, byteorder="big", signed=False)
        
        if sort_key in seen:
            if not allow_duplicates:
                raise DuplicateSignerError(entry.account)
            logger.warning("duplicate_signer_kept", account=entry.account)
        seen.add(sort_key)
        keyed.append((sort_key, entry))
    
    # Ties only occur for kept duplicates; break them on key then signature
    keyed.sort(key=lambda item: (item[0], item[1].public_key, item[1].signature))
    return [entry for _, entry in keyed]


@dataclass(frozen=True)
class MultiSignedTransaction(SignedTransaction):
    """
    A transaction authorized by several signers.
    
    The signed transaction's Signers field always holds one entry per
    signature, in canonical account ID order.
    
    Attributes:
        signatures: The signatures and public keys used to sign
    """
    
    signatures: FrozenSet[SignatureWithPublicKey] = frozenset()
    
    @classmethod
    def create(
        cls,
        unsigned: Transaction,
        signatures: Iterable[SignatureWithPublicKey],
        binary_codec: BinaryCodec,
        address_codec: Optional[AddressCodec] = None,
        config: Optional[SigningConfig] = None,
    ) -> "MultiSignedTransaction":
        """
        Assemble a multi-signed transaction.
        
        Args:
            unsigned: Transaction every signature was produced for
            signatures: Signatures with their public keys, in any order
            binary_codec: Codec used to derive the canonical bytes
            address_codec: Codec for account derivation (defaults to the ledger codec)
            config: Signing configuration (defaults to the global config)
            
        Returns:
            New MultiSignedTransaction
            
        Raises:
            EmptySignatureSetError: If no signatures are given
            DuplicateSignerError: If two signatures resolve to the same account
            AddressFormatError: If a public key cannot be turned into an account
        """
        signature_set = frozenset(signatures)
        if not signature_set:
            raise EmptySignatureSetError("At least one signature is required")
        
        address_codec = address_codec or get_address_codec()
        config = config or get_config()
        
        entries = [
            SignerEntry.from_signature(address_codec.derive_address(signature.public_key), signature)
            for signature in signature_set
        ]
        ordered = sort_signer_entries(
            entries,
            address_codec,
            allow_duplicates=config.allow_duplicate_signers,
        )
        
        logger.debug(
            "multisign_assembled",
            signer_count=len(ordered),
            accounts=[entry.account for entry in ordered],
        )
        
        return cls(
            unsigned=unsigned,
            signed=unsigned.with_signers(ordered),
            binary_codec=binary_codec,
            signatures=signature_set,
        )
    
    @property
    def signer_entries(self) -> List[SignerEntry]:
        """Signer entries in the order they appear on the signed transaction."""
        return [
            SignerEntry(
                account=wrapper["Signer"]["Account"],
                public_key=bytes.fromhex(wrapper["Signer"]["SigningPubKey"]),
                signature=bytes.fromhex(wrapper["Signer"]["TxnSignature"]),
            )
            for wrapper in self.signed.signers
        ]
