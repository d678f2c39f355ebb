"""
Pure algorithms with no domain-specific dependencies.

Modules:
    tree - Depth-first tree traversals
"""
