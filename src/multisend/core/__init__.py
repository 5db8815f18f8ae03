"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of external systems (ledger storage, RPC handlers, etc.).
"""
