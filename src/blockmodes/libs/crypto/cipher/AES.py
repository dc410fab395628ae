from __future__ import annotations

from Crypto.Cipher import AES as _AES

from ._mode_base import BaseMode, BlockCipherFunc

block_size = 16
key_size = (16, 24, 32)

MODE_ECB = 1  #: Electronic Code Book
MODE_CBC = 2  #: Cipher-Block Chaining
MODE_CTR = 6  #: Counter


class _AESContext:
    """Internal AES primitive transforming exactly one 16-byte block.

    The block transform itself is pycryptodome's AES applied to a single
    block; chaining and counters are handled by the mode classes.
    """

    __slots__ = ("_cipher",)

    def __init__(self, key: bytes) -> None:
        """Initialize the AES key schedule.

        Args:
            key: Raw AES key of length 16, 24 or 32 bytes.

        Raises:
            ValueError: If the key length is not supported.
        """
        if len(key) not in key_size:
            raise ValueError("Invalid key size")
        self._cipher = _AES.new(key, _AES.MODE_ECB)

    def encrypt_block(self, plaintext: bytes) -> bytes:
        """Encrypt one 16-byte block.

        Args:
            plaintext: Input block.

        Returns:
            The encrypted block.

        Raises:
            ValueError: If the input is not exactly 16 bytes.
        """
        if len(plaintext) != block_size:
            raise ValueError("Plaintext block must be 16 bytes")
        return self._cipher.encrypt(bytes(plaintext))

    def decrypt_block(self, ciphertext: bytes) -> bytes:
        """Decrypt one 16-byte block.

        Args:
            ciphertext: Input block.

        Returns:
            The decrypted block.

        Raises:
            ValueError: If the input is not exactly 16 bytes.
        """
        if len(ciphertext) != block_size:
            raise ValueError("Ciphertext block must be 16 bytes")
        return self._cipher.decrypt(bytes(ciphertext))


def block_funcs(key: bytes | bytearray) -> tuple[BlockCipherFunc, BlockCipherFunc]:
    """Return the single-block ``(encrypt, decrypt)`` pair bound to ``key``."""
    ctx = _AESContext(bytes(key))
    return ctx.encrypt_block, ctx.decrypt_block


def encrypt_block(block: bytes, key: bytes) -> bytes:
    """Encrypt one block under ``key``."""
    return _AESContext(bytes(key)).encrypt_block(block)


def decrypt_block(block: bytes, key: bytes) -> bytes:
    """Decrypt one block under ``key``."""
    return _AESContext(bytes(key)).decrypt_block(block)


def new(
    key: bytes | bytearray,
    mode: int,
    iv: bytes | bytearray | None = None,
    nonce: bytes | bytearray | None = None,
    initial_value: int = 0,
) -> BaseMode:
    """Create an AES cipher object in the requested mode.

    Args:
        key: AES key of length 16, 24 or 32 bytes.
        mode: One of ``MODE_ECB``, ``MODE_CBC`` or ``MODE_CTR``.
        iv: Initialization vector for CBC mode. Must be 16 bytes; if ``None``,
            a zero IV is used for learning and testing.
        nonce: Nonce for CTR mode. Must be 8 bytes.
        initial_value: First counter value for CTR mode.

    Returns:
        A mode object implementing AES encryption and decryption.

    Raises:
        ValueError: If the key length, IV length, nonce, or mode is invalid.
    """
    encrypt, decrypt = block_funcs(key)

    if mode == MODE_ECB:
        from ._mode_ecb import ECBMode

        return ECBMode(encrypt, decrypt, block_size)

    if mode == MODE_CBC:
        from ._mode_cbc import CBCMode

        return CBCMode(
            encrypt,
            decrypt,
            block_size,
            None if iv is None else bytes(iv),
        )

    if mode == MODE_CTR:
        from ._mode_ctr import CTRMode

        if nonce is None:
            raise ValueError("CTR mode requires a nonce")
        return CTRMode(encrypt, block_size, bytes(nonce), initial_value)

    raise ValueError("Unknown mode")
