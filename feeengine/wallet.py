"""Test wallets identified by Ethereum-style addresses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from Crypto.Hash import keccak
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

ADDRESS_LENGTH = 20
ZERO_ADDRESS = bytes(ADDRESS_LENGTH)
_SECP256K1_ORDER = int(
    "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141", 16
)


def address_from_public_key(public_key: bytes) -> bytes:
    """Derive the 20-byte address of an uncompressed secp256k1 public key.

    Accepts the 65-byte form with its 0x04 prefix or the bare 64 bytes.
    """
    key = bytes(public_key)
    if len(key) == 65:
        if key[0] != 0x04:
            raise ValueError("public key must be uncompressed")
        key = key[1:]
    if len(key) != 64:
        raise ValueError("public key must be 64 or 65 bytes")
    digest = keccak.new(digest_bits=256, data=key).digest()
    return digest[-ADDRESS_LENGTH:]


def _parse_private_key(text: str) -> ec.EllipticCurvePrivateKey:
    raw = text.strip()
    if raw[:2].lower() == "0x":
        raw = raw[2:]
    try:
        data = bytes.fromhex(raw)
    except ValueError as exc:
        raise ValueError("private key is not valid hex") from exc
    if len(data) != 32:
        raise ValueError("private key must be 32 bytes")
    scalar = int.from_bytes(data, "big")
    if not 0 < scalar < _SECP256K1_ORDER:
        raise ValueError("private key is not a valid secp256k1 scalar")
    return ec.derive_private_key(scalar, ec.SECP256K1())


@dataclass(frozen=True)
class TestWallet:
    """A wallet address, optionally with the key that signs for it."""

    __test__ = False

    address: bytes
    signer: Optional[ec.EllipticCurvePrivateKey] = None

    def __post_init__(self) -> None:
        if len(self.address) != ADDRESS_LENGTH:
            raise ValueError("address must be 20 bytes")

    @classmethod
    def random(cls) -> "TestWallet":
        """Return a wallet at a fixed (zero) address, without a signer."""
        return cls(ZERO_ADDRESS)

    @classmethod
    def from_private_key(cls, private_key: str) -> "TestWallet":
        """Build a signing wallet from a hex-encoded secp256k1 key."""
        signer = _parse_private_key(private_key)
        public = signer.public_key().public_bytes(
            Encoding.X962, PublicFormat.UncompressedPoint
        )
        return cls(address_from_public_key(public), signer)