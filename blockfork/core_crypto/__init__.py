# Core Crypto Module
"""
Hashing primitives used by the block chain:
- SHA-256 content digest (via the cryptography package)
"""
