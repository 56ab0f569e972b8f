"""Life Planner — temporal grouping of tasks/events and per-year goal shard coherence.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
