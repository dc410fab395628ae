from __future__ import annotations

from ..blocks import group, ungroup, xor_bytes
from ._mode_base import BaseMode, BlockCipherFunc


class CBCMode(BaseMode):
    """Cipher Block Chaining (CBC) mode.

    CBC is a stateful block-cipher mode: each encrypted block depends on the
    previous ciphertext block. The internal chaining value (IV) is updated after
    each encryption or decryption call.
    """

    def __init__(
        self,
        encrypt_block: BlockCipherFunc,
        decrypt_block: BlockCipherFunc,
        block_size: int,
        iv: bytes | None,
    ) -> None:
        """Initialize a CBC mode instance.

        Args:
            encrypt_block: Block encryption function. See :class:`BaseMode`.
            decrypt_block: Block decryption function. See :class:`BaseMode`.
            block_size: Block size in bytes. See :class:`BaseMode`.
            iv: Initialization vector. Must be exactly ``block_size`` bytes.
                If ``None``, a zero IV is used (suitable for tests or learning,
                but not for real cryptographic use).

        Raises:
            ValueError: If ``iv`` does not match ``block_size``.
        """
        super().__init__(encrypt_block, decrypt_block, block_size)
        if iv is None:
            iv = bytes(block_size)
        if len(iv) != block_size:
            raise ValueError("Invalid IV size")
        self.iv = bytes(iv)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt data in CBC mode.

        Each plaintext block is XORed with the previous ciphertext block (the
        IV for the first one) before encryption, so this direction is
        strictly sequential.

        Args:
            data: Plaintext bytes. Length must be a multiple of
                ``block_size``.

        Returns:
            Ciphertext bytes.

        Raises:
            BlockLengthError: If the input length is not a multiple of
                ``block_size``.
        """
        self._check_aligned(data)

        out: list[bytes] = []
        prev = self.iv

        for block in group(data, self.block_size):
            ct = self.encrypt_block(xor_bytes(block, prev))
            out.append(ct)
            prev = ct

        self.iv = prev
        return ungroup(out)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt data in CBC mode.

        Every block is decrypted on its own and then XORed with the previous
        *ciphertext* block. A damaged ciphertext block therefore garbles its
        own plaintext and the next one, and nothing after that.

        Args:
            data: Ciphertext bytes. Length must be a multiple of
                ``block_size``.

        Returns:
            Plaintext bytes.

        Raises:
            BlockLengthError: If the input length is not a multiple of
                ``block_size``.
        """
        self._check_aligned(data)

        out: list[bytes] = []
        prev = self.iv

        for block in group(data, self.block_size):
            out.append(xor_bytes(self.decrypt_block(block), prev))
            prev = block

        self.iv = prev
        return ungroup(out)
