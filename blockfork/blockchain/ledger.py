"""
Block Stream Ledger Module

Implements a minimal hash-linked block chain:
- Content-derived block hashes (SHA-256 of the payload only)
- Parent linking to the previous block's hash
- Sentinel all-zero parent hash for the first block
- Append-only growth

Integrity features:
- Immutable blocks (frozen dataclass)
- Read-only views of the chain
- Full chain validation
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from ..core_crypto.digest import HASH_SIZE, ZERO_HASH, digest


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

GENESIS_PARENT_HASH = ZERO_HASH  # 32 zero bytes for the first block
FIRST_BLOCK_NUMBER = 1


# ============================================================================
# Errors
# ============================================================================

class ChainError(Exception):
    """Base class for block chain errors."""
    pass


class ValidationError(ChainError):
    """Raised when block chain validation fails."""
    pass


# ============================================================================
# Block Structure (Immutable)
# ============================================================================

@dataclass(frozen=True)
class Block:
    """
    Immutable block structure.

    frozen=True ensures blocks cannot be modified once appended, and
    equality is field-wise over number, hash, parent_hash and content.
    """
    number: int
    hash: bytes
    parent_hash: bytes
    content: bytes

    def __post_init__(self) -> None:
        if self.number < FIRST_BLOCK_NUMBER:
            raise ValueError(
                f"Block number must be >= {FIRST_BLOCK_NUMBER}, got {self.number}"
            )
        if not isinstance(self.content, bytes):
            raise TypeError("Block content must be bytes")
        for name in ('hash', 'parent_hash'):
            value = getattr(self, name)
            if not isinstance(value, bytes) or len(value) != HASH_SIZE:
                raise ValueError(f"Block {name} must be {HASH_SIZE} bytes")

    @property
    def hash_hex(self) -> str:
        """Hex-encoded block hash."""
        return self.hash.hex()

    @property
    def parent_hash_hex(self) -> str:
        """Hex-encoded parent hash."""
        return self.parent_hash.hex()

    @property
    def is_first(self) -> bool:
        """True for the first block of a chain."""
        return self.number == FIRST_BLOCK_NUMBER

    def __str__(self) -> str:
        return f"Block[{self.number}] : {self.hash_hex} with data : {list(self.content)}"


# ============================================================================
# Block Stream
# ============================================================================

class BlockStream:
    """
    An append-only, hash-linked sequence of blocks.

    Blocks are only ever added at the tail through append(); existing
    blocks are never replaced, removed or reordered.
    """

    def __init__(self) -> None:
        self._blocks: List[Block] = []

    @property
    def blocks(self) -> List[Block]:
        """Get the blocks (read-only view)."""
        return list(self._blocks)  # Return copy to prevent mutation

    @property
    def length(self) -> int:
        """Get chain length."""
        return len(self._blocks)

    @property
    def last_block(self) -> Optional[Block]:
        """Get the tip of the chain, or None if empty."""
        return self._blocks[-1] if self._blocks else None

    @property
    def is_empty(self) -> bool:
        return not self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __getitem__(self, index: int) -> Block:
        return self._blocks[index]

    def __repr__(self) -> str:
        return f"BlockStream(length={len(self._blocks)})"

    def append(self, content: bytes) -> None:
        """
        Append a new block carrying the given content.

        The block hash is computed from the content alone and the block is
        bound to the current tip (or to the sentinel parent when empty).

        Args:
            content: Block payload (bytes-like, copied into immutable bytes)

        Raises:
            TypeError: If content is not bytes-like
        """
        content = bytes(memoryview(content))

        tip = self.last_block
        if tip is None:
            number = FIRST_BLOCK_NUMBER
            parent_hash = GENESIS_PARENT_HASH
        else:
            number = tip.number + 1
            parent_hash = tip.hash

        block = Block(
            number=number,
            hash=digest(content),
            parent_hash=parent_hash,
            content=content
        )
        self._blocks.append(block)
        logger.debug("Appended %s", block)

    def validate_chain(self) -> bool:
        """
        Validate the entire chain.

        Returns:
            True if chain is valid (an empty chain is valid)

        Raises:
            ValidationError: If chain is invalid
        """
        prev_block = None
        for block in self._blocks:
            if digest(block.content) != block.hash:
                raise ValidationError(f"Block hash mismatch at block {block.number}")

            if prev_block is None:
                if block.number != FIRST_BLOCK_NUMBER:
                    raise ValidationError(
                        f"Invalid first block number: {block.number}"
                    )
                if block.parent_hash != GENESIS_PARENT_HASH:
                    raise ValidationError("First block must have the zero parent hash")
            else:
                if block.number != prev_block.number + 1:
                    raise ValidationError(
                        f"Invalid number: expected {prev_block.number + 1}, "
                        f"got {block.number}"
                    )
                if block.parent_hash != prev_block.hash:
                    raise ValidationError(
                        f"Parent hash mismatch at block {block.number}"
                    )
            prev_block = block

        return True


# Name used throughout the docs for a BlockStream.
Chain = BlockStream


# ============================================================================
# Convenience Functions
# ============================================================================

def new_chain() -> BlockStream:
    """Create a new, empty block stream."""
    return BlockStream()


def build_chain_from_bytes(items: Iterable[int]) -> BlockStream:
    """
    Build a chain with one single-byte block per item.

    This is a fixture builder: each integer item becomes the one-byte
    content of its own block, in order.

    Args:
        items: Byte values (0-255)

    Returns:
        The populated block stream

    Raises:
        ValueError: If an item is outside the byte range
    """
    stream = new_chain()
    for item in items:
        stream.append(bytes([item]))
    return stream


start_chain = build_chain_from_bytes
