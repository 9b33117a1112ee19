"""
Common Ancestor Finder

Finds the fork point shared by several independently grown block streams.

A fork point is the block that two chains both name as the immediate
predecessor of their next block. The scan therefore compares parent hashes,
not block hashes: two equal block hashes only show equal content, while a
repeated parent hash shows two chains extending the same prior block.

Scan order:
- Chains are visited in the order given, blocks in chain order
- The first repeated parent hash wins
- With several fork points the result depends on that order

The finder only reads its inputs; chains are never mutated.
"""

import logging
from typing import Dict, Iterable, Optional, Sequence, Set

from .ledger import Block, ChainError


logger = logging.getLogger(__name__)


class AncestorLookupError(ChainError, RuntimeError):
    """
    Raised when a parent hash was seen but its block was never recorded.

    Every recorded parent hash is the hash of an earlier block in the scan,
    so this signals a broken invariant, not a missing ancestor.
    """
    pass


class AncestorNotFoundError(ChainError, LookupError):
    """Raised by require_common_ancestor when the chains share no fork point."""
    pass


def find_common_ancestor(chains: Sequence[Iterable[Block]]) -> Optional[Block]:
    """
    Find the first common ancestor across the given chains.

    Args:
        chains: Ordered chains (BlockStream or any iterable of blocks)

    Returns:
        The fork point block, or None when the chains share no fork point

    Raises:
        AncestorLookupError: If a repeated parent hash has no recorded block
    """
    seen_as_parent: Set[str] = set()
    block_by_hash: Dict[str, Block] = {}
    scanned = 0

    for chain in chains:
        for block in chain:
            scanned += 1
            parent_key = block.parent_hash_hex
            current_key = block.hash_hex

            # The sentinel parent of a first block is never a fork point
            if block.is_first:
                block_by_hash[current_key] = block
                continue

            if parent_key in seen_as_parent:
                ancestor = block_by_hash.get(parent_key)
                if ancestor is None:
                    raise AncestorLookupError(
                        f"Parent hash {parent_key} seen without a recorded block"
                    )
                logger.debug(
                    "Fork point found after %d blocks: %s", scanned, ancestor
                )
                return ancestor

            seen_as_parent.add(parent_key)
            block_by_hash[current_key] = block

    logger.debug("No common ancestor in %d blocks", scanned)
    return None


async def find_common_ancestor_async(
    chains: Sequence[Iterable[Block]]
) -> Optional[Block]:
    """
    Coroutine form of find_common_ancestor for asynchronous callers.

    The scan is pure in-memory work and runs to completion without yielding.
    """
    return find_common_ancestor(chains)


def require_common_ancestor(chains: Sequence[Iterable[Block]]) -> Block:
    """
    Find the common ancestor, raising if there is none.

    Returns:
        The fork point block

    Raises:
        AncestorNotFoundError: If the chains share no fork point
        AncestorLookupError: If a repeated parent hash has no recorded block
    """
    ancestor = find_common_ancestor(chains)
    if ancestor is None:
        raise AncestorNotFoundError("No common ancestor")
    return ancestor
