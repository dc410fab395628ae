import abc
from collections.abc import Callable

from ..errors import BlockLengthError

BlockCipherFunc = Callable[[bytes], bytes]


class BaseMode(abc.ABC):
    """Base class for block-cipher modes of operation.

    A mode instance wraps a *block cipher primitive* that encrypts or decrypts
    a single block, and turns it into :meth:`encrypt` and :meth:`decrypt`
    operations over block-aligned data of any length. Padding is the
    caller's concern.
    """

    def __init__(
        self,
        encrypt_block: BlockCipherFunc,
        decrypt_block: BlockCipherFunc | None,
        block_size: int,
    ) -> None:
        """Initialize a block-cipher mode instance.

        Args:
            encrypt_block: Callable that encrypts a single block of length
                ``block_size``.
            decrypt_block: Callable that decrypts a single block of length
                ``block_size``. May be ``None`` for modes that only use the
                forward direction.
            block_size: Block size in bytes (16 for AES).
        """
        self.encrypt_block = encrypt_block
        self.decrypt_block = decrypt_block
        self.block_size = block_size

    def _check_aligned(self, data: bytes) -> None:
        if len(data) % self.block_size != 0:
            raise BlockLengthError("Data length not a multiple of block size")

    @abc.abstractmethod
    def encrypt(self, data: bytes) -> bytes:
        """Encrypt plaintext.

        Args:
            data: Plaintext bytes. The length must be a multiple of
                ``block_size``. Padding is not applied here.

        Returns:
            Ciphertext bytes of the same length.

        Raises:
            BlockLengthError: If the input length is not a multiple of
                ``block_size``.
        """
        ...

    @abc.abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Decrypt ciphertext.

        Args:
            data: Ciphertext bytes. The length must be a multiple of
                ``block_size``. Unpadding is not performed here.

        Returns:
            Plaintext bytes of the same length.

        Raises:
            BlockLengthError: If the input length is not a multiple of
                ``block_size``.
        """
        ...
