from .version import __version__ as __version__

__title__ = "blockmodes"
__description__ = "Block-cipher modes of operation (ECB, CBC, CTR) over AES-128."
__license__ = "Apache-2.0"

__all__ = [
    "cbc_decrypt",
    "cbc_encrypt",
    "ctr_decrypt",
    "ctr_encrypt",
    "decrypt",
    "ecb_decrypt",
    "ecb_encrypt",
    "encrypt",
]

from .modes import (
    cbc_decrypt,
    cbc_encrypt,
    ctr_decrypt,
    ctr_encrypt,
    decrypt,
    ecb_decrypt,
    ecb_encrypt,
    encrypt,
)
