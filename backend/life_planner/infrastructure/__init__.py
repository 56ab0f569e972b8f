"""Infrastructure Layer — shell implementations of core Protocols and cross-cutting concerns.

Invariants:
    - Implements core Protocols (GoalStore, RevalidationPort); core never imports from here
    - Logging setup lives here, not in core
"""
