# Blockchain Module
"""
Block chain implementation including:
- Content-hashed, parent-linked immutable blocks
- Append-only block streams
- Cross-chain common ancestor (fork point) lookup
"""

_LEDGER_NAMES = {
    'Block',
    'BlockStream',
    'Chain',
    'ChainError',
    'ValidationError',
    'new_chain',
    'build_chain_from_bytes',
    'start_chain',
    'GENESIS_PARENT_HASH',
    'FIRST_BLOCK_NUMBER',
}


# Lazy imports to avoid RuntimeWarning when running modules directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    if name in _LEDGER_NAMES:
        from . import ledger
        return getattr(ledger, name)
    from . import ancestor
    return getattr(ancestor, name)


__all__ = sorted(_LEDGER_NAMES) + [
    'AncestorLookupError',
    'AncestorNotFoundError',
    'find_common_ancestor',
    'find_common_ancestor_async',
    'require_common_ancestor',
]
