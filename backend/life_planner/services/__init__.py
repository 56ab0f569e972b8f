"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services call collaborators only through core Protocols
    - Decisions (which shards, which year) are delegated to core functions
"""
