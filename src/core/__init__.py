"""
Core numeric primitives and invariants.

This module contains the foundational building blocks that are independent
of external systems (buffers, allocators, transports, etc.).
"""
