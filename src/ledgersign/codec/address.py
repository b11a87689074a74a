"""
Address codec for XRP Ledger style accounts.

An account ID is RIPEMD-160 over SHA-256 of the signer's public key. The
classic address is the base58check encoding of a type byte followed by
the account ID, using the ledger's own base58 alphabet.
"""

import base58
from Crypto.Hash import RIPEMD160
from cryptography.hazmat.primitives import hashes

from ledgersign.codec.interface import AddressCodec, AddressFormatError

ACCOUNT_ID_TYPE_PREFIX = b"\x00"
ACCOUNT_ID_LENGTH = 20
PUBLIC_KEY_LENGTH = 33

# 0x02/0x03: compressed secp256k1, 0xED: Ed25519
PUBLIC_KEY_PREFIXES = (0x02, 0x03, 0xED)


class XrplAddressCodec(AddressCodec):
    """
    Derives and decodes classic ledger addresses.
    
    Stateless; a single instance may be shared freely.
    """
    
    def compute_account_id(self, public_key: bytes) -> bytes:
        """
        Compute the 20-byte account ID for a public key.
        
        Args:
            public_key: 33-byte ledger public key
            
        Returns:
            Raw account ID
        """
        public_key = bytes(public_key)
        if len(public_key) != PUBLIC_KEY_LENGTH:
            raise AddressFormatError(
                f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}"
            )
        if public_key[0] not in PUBLIC_KEY_PREFIXES:
            raise AddressFormatError(f"Unknown public key prefix: 0x{public_key[0]:02X}")
        
        sha256 = hashes.Hash(hashes.SHA256())
        sha256.update(public_key)
        return RIPEMD160.new(sha256.finalize()).digest()
    
    def encode_account_id(self, account_id: bytes) -> str:
        """
        Encode a raw account ID as a classic address.
        
        Args:
            account_id: 20-byte account ID
            
        Returns:
            Base58check address (starts with "r")
        """
        account_id = bytes(account_id)
        if len(account_id) != ACCOUNT_ID_LENGTH:
            raise AddressFormatError(
                f"Account ID must be {ACCOUNT_ID_LENGTH} bytes, got {len(account_id)}"
            )
        encoded = base58.b58encode_check(
            ACCOUNT_ID_TYPE_PREFIX + account_id,
            alphabet=base58.XRP_ALPHABET,
        )
        return encoded.decode("ascii")
    
    def derive_address(self, public_key: bytes) -> str:
        """Derive the classic address controlled by a public key."""
        return self.encode_account_id(self.compute_account_id(public_key))
    
    def decode_account_id(self, address: str) -> bytes:
        """
        Decode a classic address into its 20-byte account ID.
        
        Args:
            address: Base58check address
            
        Returns:
            Raw account ID
            
        Raises:
            AddressFormatError: On bad characters, checksum, type byte or length
        """
        try:
            payload = base58.b58decode_check(address, alphabet=base58.XRP_ALPHABET)
        except (TypeError, ValueError) as e:
            raise AddressFormatError(f"Invalid address {address!r}: {e}") from e
        
        if len(payload) != len(ACCOUNT_ID_TYPE_PREFIX) + ACCOUNT_ID_LENGTH:
            raise AddressFormatError(
                f"Invalid address {address!r}: payload is {len(payload)} bytes"
            )
        if payload[:1] != ACCOUNT_ID_TYPE_PREFIX:
            raise AddressFormatError(
                f"Invalid address {address!r}: not an account ID (type 0x{payload[0]:02X})"
            )
        return payload[1:]


# Shared default instance
_default_codec = XrplAddressCodec()


def get_address_codec() -> XrplAddressCodec:
    """Get the shared default address codec."""
    return _default_codec
