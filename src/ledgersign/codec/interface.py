"""
Abstract interfaces for the ledger codecs.

Defines the contract for the binary and address codecs that the signing
code consumes. Codec implementations live outside this package, apart from
the address codec in ledgersign.codec.address.
"""

from abc import ABC, abstractmethod


class EncodingError(Exception):
    """Raised when a transaction cannot be canonically serialized."""
    pass


class AddressFormatError(Exception):
    """Raised when a public key or address is malformed."""
    pass


class BinaryCodec(ABC):
    """
    Abstract interface for the ledger binary codec.
    
    Converts a transaction's canonical JSON text into the canonical wire
    encoding, returned as a hex string.
    """
    
    @abstractmethod
    def encode(self, transaction_json: str) -> str:
        """
        Encode a transaction into canonical binary form.
        
        Args:
            transaction_json: Canonical JSON text of the transaction
            
        Returns:
            Hex string of the encoded transaction (uppercase by convention)
            
        Raises:
            EncodingError: If the transaction cannot be serialized
        """
        pass


class AddressCodec(ABC):
    """
    Abstract interface for the ledger address codec.
    """
    
    @abstractmethod
    def derive_address(self, public_key: bytes) -> str:
        """
        Derive the account address controlled by a public key.
        
        Raises:
            AddressFormatError: If the public key is malformed
        """
        pass
    
    @abstractmethod
    def decode_account_id(self, address: str) -> bytes:
        """
        Decode an address into its raw, fixed-length account ID.
        
        Raises:
            AddressFormatError: If the address is malformed
        """
        pass
