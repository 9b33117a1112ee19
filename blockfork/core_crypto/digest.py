"""
Block Digest Helper

Computes the content digest that identifies a block and links it to its
successor. The digest is SHA-256 (FIPS 180-4) provided by the `cryptography`
package; this module only fixes the algorithm and the output width.

Properties:
- Deterministic: the same content always yields the same digest
- Fixed width: 256-bit (32-byte) output
- Stateless: a fresh hash context per call
"""

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes


# ============================================================================
# Constants
# ============================================================================

HASH_SIZE = 32  # SHA-256 output width in bytes
ZERO_HASH = b'\x00' * HASH_SIZE


def digest(content: bytes) -> bytes:
    """
    Compute the SHA-256 digest of block content.

    Args:
        content: Block payload bytes

    Returns:
        256-bit (32-byte) digest as bytes

    Raises:
        TypeError: If content is not bytes-like

    Example:
        >>> digest(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    hasher = hashes.Hash(hashes.SHA256(), backend=default_backend())
    hasher.update(content)
    return hasher.finalize()


def digest_hex(content: bytes) -> str:
    """
    Compute the digest and return it as a lower-case hexadecimal string.

    Args:
        content: Block payload bytes

    Returns:
        64-character hexadecimal string
    """
    return digest(content).hex()
