"""
blockfork - hash-linked block streams with cross-chain
common ancestor (fork point) lookup.
"""

__version__ = "0.1.0"
