from __future__ import annotations

from ..blocks import group, ungroup
from ._mode_base import BaseMode


class ECBMode(BaseMode):
    """Electronic Code Book (ECB) mode.

    ECB is stateless: each block is processed independently without an IV or
    chaining. Identical plaintext blocks under one key give identical
    ciphertext blocks, so the structure of the input leaks. It is here to
    show exactly that.
    """

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt block-aligned data in ECB mode.

        Args:
            data: Plaintext bytes. Length must be a multiple of ``block_size``.

        Returns:
            Ciphertext bytes.

        Raises:
            BlockLengthError: If the input length is not a multiple of
                ``block_size``.
        """
        self._check_aligned(data)
        blocks = group(data, self.block_size)
        return ungroup(self.encrypt_block(block) for block in blocks)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt block-aligned data in ECB mode.

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
        blocks = group(data, self.block_size)
        return ungroup(self.decrypt_block(block) for block in blocks)
