"""Services Layer — orchestration around the pure core.

Invariants:
    - Services own shell concerns (clock, cache, logging); math stays in core/
    - Instances are built explicitly from Settings (no module-level singletons)
"""
