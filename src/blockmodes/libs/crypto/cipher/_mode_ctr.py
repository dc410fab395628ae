from __future__ import annotations

from ..blocks import group, ungroup, xor_bytes
from ._mode_base import BaseMode, BlockCipherFunc

_COUNTER_LIMIT = 1 << 64


class CTRMode(BaseMode):
    """Counter (CTR) mode.

    The keystream block for index ``i`` is the encryption of
    ``nonce || big-endian 64-bit i``; data is XORed with it. Encryption and
    decryption are the same operation and only the forward block function is
    ever used. Each keystream block depends on (key, nonce, index) alone, so
    any block can be processed on its own.

    The counter advances across successive calls on one instance.
    """

    def __init__(
        self,
        encrypt_block: BlockCipherFunc,
        block_size: int,
        nonce: bytes,
        initial_value: int = 0,
    ) -> None:
        """Initialize a CTR mode instance.

        Args:
            encrypt_block: Block encryption function. See :class:`BaseMode`.
            block_size: Block size in bytes. Must be even.
            nonce: Per-message nonce of exactly ``block_size // 2`` bytes.
            initial_value: Counter value for the first block.

        Raises:
            ValueError: If the block size is odd or the nonce has the wrong
                size.
            OverflowError: If ``initial_value`` is outside the counter range.
        """
        super().__init__(encrypt_block, None, block_size)
        if block_size % 2:
            raise ValueError("CTR mode needs an even block size")
        if len(nonce) != block_size // 2:
            raise ValueError("Invalid nonce size")
        self.nonce = bytes(nonce)
        self.counter = self._check_index(initial_value)

    @staticmethod
    def _check_index(index: int) -> int:
        if not (0 <= index < _COUNTER_LIMIT):
            raise OverflowError("Counter out of 64-bit range")
        return index

    def counter_block(self, index: int) -> bytes:
        """Build the cipher input ``nonce || counter`` for block ``index``."""
        index = self._check_index(index)
        return self.nonce + index.to_bytes(self.block_size // 2, "big")

    def keystream_block(self, index: int) -> bytes:
        """Return the keystream block for block ``index``."""
        return self.encrypt_block(self.counter_block(index))

    def _crypt(self, data: bytes) -> bytes:
        self._check_aligned(data)

        out: list[bytes] = []
        index = self.counter
        for block in group(data, self.block_size):
            out.append(xor_bytes(block, self.keystream_block(index)))
            index += 1

        self.counter = index
        return ungroup(out)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt block-aligned data in CTR mode.

        Args:
            data: Plaintext bytes. Length must be a multiple of
                ``block_size``.

        Returns:
            Ciphertext bytes.

        Raises:
            BlockLengthError: If the input length is not a multiple of
                ``block_size``.
        """
        return self._crypt(data)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt block-aligned data in CTR mode.

        Same as :meth:`encrypt`; the block decrypt direction is never used.
        """
        return self._crypt(data)
