"""
Encrypt and decrypt arbitrary-length data with AES-128 in ECB, CBC or CTR mode.

Each helper pads the input, splits it into 16-byte blocks, runs the mode over
them and joins the result. CBC and CTR draw a fresh IV or nonce for every
call and send it as the first ciphertext block.

WARNING: ECB is not secure. Equal plaintext blocks encrypt to equal
ciphertext blocks, so the shape of the data shows through. None of the modes
detects tampering.
"""

from __future__ import annotations

import logging

from blockmodes.libs.crypto.blocks import group, ungroup
from blockmodes.libs.crypto.cipher import AES
from blockmodes.libs.crypto.cipher._mode_cbc import CBCMode
from blockmodes.libs.crypto.cipher._mode_ctr import CTRMode
from blockmodes.libs.crypto.cipher._mode_ecb import ECBMode
from blockmodes.libs.crypto.errors import BlockLengthError
from blockmodes.libs.crypto.padding import pad, unpad
from blockmodes.libs.crypto.rng import RandomSource, random_bytes
from blockmodes.schemas import MODE_NAMES, CipherConfig

logger = logging.getLogger(__name__)

BLOCK_SIZE = AES.block_size
KEY_SIZE = 16
NONCE_SIZE = BLOCK_SIZE // 2


def _check_key(key: bytes) -> bytes:
    if len(key) != KEY_SIZE:
        raise ValueError(f"Key must be {KEY_SIZE} bytes, got {len(key)}")
    return bytes(key)


def _split_header(cipher_text: bytes) -> tuple[bytes, bytes]:
    """Split off the leading IV / nonce block, validating alignment."""
    blocks = group(cipher_text, BLOCK_SIZE)
    if not blocks:
        raise BlockLengthError("Ciphertext is missing its leading IV/nonce block")
    return blocks[0], ungroup(blocks[1:])


# -----------------------------------------------------------------------------
# ECB
# -----------------------------------------------------------------------------


def ecb_encrypt(plain_text: bytes, key: bytes) -> bytes:
    """Encrypt in Electronic Code Book mode.

    Deterministic: the same plaintext and key always give the same output.
    """
    enc, dec = AES.block_funcs(_check_key(key))
    padded = pad(plain_text, BLOCK_SIZE)
    logger.debug(
        "ECB encrypt: %d bytes in %d blocks",
        len(plain_text),
        len(padded) // BLOCK_SIZE,
    )
    return ECBMode(enc, dec, BLOCK_SIZE).encrypt(padded)


def ecb_decrypt(
    cipher_text: bytes,
    key: bytes,
    *,
    strict_padding: bool = False,
) -> bytes:
    """Opposite of :func:`ecb_encrypt`."""
    enc, dec = AES.block_funcs(_check_key(key))
    logger.debug("ECB decrypt: %d bytes", len(cipher_text))
    padded = ECBMode(enc, dec, BLOCK_SIZE).decrypt(cipher_text)
    return unpad(padded, BLOCK_SIZE, strict=strict_padding)


# -----------------------------------------------------------------------------
# CBC
# -----------------------------------------------------------------------------


def cbc_encrypt(
    plain_text: bytes,
    key: bytes,
    *,
    rng: RandomSource | None = None,
) -> bytes:
    """Encrypt in Cipher Block Chaining mode.

    A random IV is drawn for every call and prepended, unencrypted, as the
    first block of the output.

    Args:
        plain_text: Data to encrypt.
        key: 16-byte key.
        rng: Source of random bytes for the IV. Defaults to ``os.urandom``.

    Returns:
        ``IV || ciphertext blocks``.
    """
    enc, dec = AES.block_funcs(_check_key(key))
    iv = random_bytes(BLOCK_SIZE, rng)
    padded = pad(plain_text, BLOCK_SIZE)
    logger.debug(
        "CBC encrypt: %d bytes in %d blocks",
        len(plain_text),
        len(padded) // BLOCK_SIZE,
    )
    return iv + CBCMode(enc, dec, BLOCK_SIZE, iv).encrypt(padded)


def cbc_decrypt(
    cipher_text: bytes,
    key: bytes,
    *,
    strict_padding: bool = False,
) -> bytes:
    """Opposite of :func:`cbc_encrypt`.

    The first block is taken as the IV. A modified ciphertext byte garbles
    the plaintext block it lies in and the one after it; every other block
    still decrypts correctly.

    Raises:
        BlockLengthError: If the ciphertext is empty or not block-aligned.
    """
    enc, dec = AES.block_funcs(_check_key(key))
    iv, body = _split_header(cipher_text)
    logger.debug("CBC decrypt: %d bytes", len(body))
    padded = CBCMode(enc, dec, BLOCK_SIZE, iv).decrypt(body)
    return unpad(padded, BLOCK_SIZE, strict=strict_padding)


# -----------------------------------------------------------------------------
# CTR
# -----------------------------------------------------------------------------


def ctr_encrypt(
    plain_text: bytes,
    key: bytes,
    *,
    rng: RandomSource | None = None,
) -> bytes:
    """Encrypt in Counter mode.

    An 8-byte random nonce is drawn for every call. Block ``i`` is XORed with
    the encryption of ``nonce || i`` (64-bit big-endian, starting at 0). The
    nonce is sent first as a full block whose low half is zero.

    Args:
        plain_text: Data to encrypt.
        key: 16-byte key.
        rng: Source of random bytes for the nonce. Defaults to ``os.urandom``.

    Returns:
        ``nonce block || ciphertext blocks``.
    """
    enc, _ = AES.block_funcs(_check_key(key))
    nonce = random_bytes(NONCE_SIZE, rng)
    padded = pad(plain_text, BLOCK_SIZE)
    logger.debug(
        "CTR encrypt: %d bytes in %d blocks",
        len(plain_text),
        len(padded) // BLOCK_SIZE,
    )
    header = nonce + bytes(BLOCK_SIZE - NONCE_SIZE)
    return header + CTRMode(enc, BLOCK_SIZE, nonce).encrypt(padded)


def ctr_decrypt(
    cipher_text: bytes,
    key: bytes,
    *,
    strict_padding: bool = False,
) -> bytes:
    """Opposite of :func:`ctr_encrypt`.

    Only the high half of the first block is read as the nonce. A modified
    ciphertext byte garbles only the block it lies in.

    Raises:
        BlockLengthError: If the ciphertext is empty or not block-aligned.
    """
    enc, _ = AES.block_funcs(_check_key(key))
    header, body = _split_header(cipher_text)
    logger.debug("CTR decrypt: %d bytes", len(body))
    padded = CTRMode(enc, BLOCK_SIZE, header[:NONCE_SIZE]).decrypt(body)
    return unpad(padded, BLOCK_SIZE, strict=strict_padding)


# -----------------------------------------------------------------------------
# Dispatch by name
# -----------------------------------------------------------------------------


def _resolve_mode(mode: str | None, config: CipherConfig) -> str:
    name = (mode or config.default_mode).lower()
    if name not in MODE_NAMES:
        raise ValueError(f"Unknown cipher mode: {name!r}")
    return name


def encrypt(
    plain_text: bytes,
    key: bytes,
    mode: str | None = None,
    *,
    config: CipherConfig | None = None,
    rng: RandomSource | None = None,
) -> bytes:
    """Encrypt with the named mode, or the configured default.

    Args:
        plain_text: Data to encrypt.
        key: 16-byte key.
        mode: ``"ecb"``, ``"cbc"`` or ``"ctr"``. Falls back to
            ``config.default_mode``.
        config: Cipher settings. Defaults to :class:`CipherConfig`.
        rng: Random source for the IV or nonce. Ignored for ECB.

    Raises:
        ValueError: If the mode name is unknown.
    """
    cfg = config or CipherConfig()
    name = _resolve_mode(mode, cfg)
    if name == "ecb":
        return ecb_encrypt(plain_text, key)
    if name == "cbc":
        return cbc_encrypt(plain_text, key, rng=rng)
    return ctr_encrypt(plain_text, key, rng=rng)


def decrypt(
    cipher_text: bytes,
    key: bytes,
    mode: str | None = None,
    *,
    config: CipherConfig | None = None,
) -> bytes:
    """Decrypt with the named mode, or the configured default.

    The padding policy follows ``config.strict_padding``.
    """
    cfg = config or CipherConfig()
    name = _resolve_mode(mode, cfg)
    if name == "ecb":
        return ecb_decrypt(cipher_text, key, strict_padding=cfg.strict_padding)
    if name == "cbc":
        return cbc_decrypt(cipher_text, key, strict_padding=cfg.strict_padding)
    return ctr_decrypt(cipher_text, key, strict_padding=cfg.strict_padding)
