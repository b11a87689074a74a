"""
Codec module.

Interfaces for the binary and address codecs, plus the ledger address codec.
"""

from ledgersign.codec.interface import (
    AddressCodec,
    AddressFormatError,
    BinaryCodec,
    EncodingError,
)
from ledgersign.codec.address import XrplAddressCodec, get_address_codec

__all__ = [
    "AddressCodec",
    "AddressFormatError",
    "BinaryCodec",
    "EncodingError",
    "XrplAddressCodec",
    "get_address_codec",
]
