"""
Pytest configuration and shared fixtures for the test suite.
"""

from typing import Dict, List

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ledgersign.codec.address import XrplAddressCodec
from ledgersign.codec.interface import AddressCodec, BinaryCodec, EncodingError
from ledgersign.config import SigningConfig
from ledgersign.core.signature import SignatureWithPublicKey
from ledgersign.core.transaction import Transaction


# ============================================================================
# Codec Doubles
# ============================================================================

class HexJsonBinaryCodec(BinaryCodec):
    """Binary codec double: the canonical JSON text as uppercase hex."""
    
    def __init__(self):
        self.calls = 0
    
    def encode(self, transaction_json: str) -> str:
        self.calls += 1
        return transaction_json.encode("utf-8").hex().upper()


class FailingBinaryCodec(BinaryCodec):
    """Binary codec double that cannot encode anything."""
    
    def encode(self, transaction_json: str) -> str:
        raise EncodingError("Unknown field: Bogus")


class FixedAddressCodec(AddressCodec):
    """Address codec double mapping public keys to preassigned addresses."""
    
    def __init__(self, addresses: Dict[bytes, str]):
        self.addresses = addresses
        self._codec = XrplAddressCodec()
    
    def derive_address(self, public_key: bytes) -> str:
        return self.addresses[bytes(public_key)]
    
    def decode_account_id(self, address: str) -> bytes:
        return self._codec.decode_account_id(address)


# ============================================================================
# Test Data Generators
# ============================================================================

def generate_test_private_key(index: int = 0) -> Ed25519PrivateKey:
    """Generate a deterministic Ed25519 test key."""
    return Ed25519PrivateKey.from_private_bytes(bytes([index + 1]) * 32)


def ledger_public_key(private_key: Ed25519PrivateKey) -> bytes:
    """Ledger form of an Ed25519 public key (0xED prefix + raw key)."""
    raw = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    return b"\xed" + raw


def sign_for(index: int, transaction: Transaction, binary_codec: BinaryCodec) -> SignatureWithPublicKey:
    """Sign a transaction's encoding with the index-th test key."""
    private_key = generate_test_private_key(index)
    message = bytes.fromhex(binary_codec.encode(transaction.to_json()))
    return SignatureWithPublicKey(
        public_key=ledger_public_key(private_key),
        signature=private_key.sign(message),
    )


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def test_config() -> SigningConfig:
    """Create a test configuration."""
    return SigningConfig(
        allow_duplicate_signers=False,
        log_level="DEBUG",
    )


@pytest.fixture
def binary_codec() -> HexJsonBinaryCodec:
    """Create a deterministic binary codec double."""
    return HexJsonBinaryCodec()


@pytest.fixture
def address_codec() -> XrplAddressCodec:
    """Create the ledger address codec."""
    return XrplAddressCodec()


@pytest.fixture
def unsigned_payment() -> Transaction:
    """Create an unsigned multi-sign ready payment."""
    return Transaction.from_dict({
        "TransactionType": "Payment",
        "Account": "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh",
        "Destination": "rrrrrrrrrrrrrrrrrrrrBZbvji",
        "Amount": "1000000",
        "Fee": "30",
        "Sequence": 7,
        "SigningPubKey": "",
    })


@pytest.fixture
def signatures(unsigned_payment, binary_codec) -> List[SignatureWithPublicKey]:
    """Create signatures from three distinct test keys."""
    return [sign_for(i, unsigned_payment, binary_codec) for i in range(3)]
