"""
Protocols and type aliases shared across the core.
"""
