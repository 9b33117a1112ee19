"""
blockfork - Main Entry Point
Builds two block streams that share a tail and reports their fork point.
"""

import logging

from .blockchain.ancestor import find_common_ancestor
from .blockchain.ledger import build_chain_from_bytes


logger = logging.getLogger(__name__)


CHAIN_A = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
CHAIN_B = [10, 20, 30, 40, 50, 6, 7, 8, 9, 10]


def main() -> int:
    """Main entry point for blockfork."""
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    chains = [build_chain_from_bytes(CHAIN_A), build_chain_from_bytes(CHAIN_B)]

    print("=" * 50)
    print("blockfork - common ancestor lookup")
    print("=" * 50)
    for label, chain in zip("AB", chains):
        print(f"\nChain {label} ({chain.length} blocks)")
        for block in chain:
            print(f"  {block}")

    logger.info("Scanning %d chains for a common ancestor", len(chains))
    ancestor = find_common_ancestor(chains)
    print("\nCommon ancestor:")
    if ancestor is None:
        print("  none")
    else:
        print(f"  {ancestor}")
        print(f"  parent: {ancestor.parent_hash_hex}")
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
