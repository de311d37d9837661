"""Infrastructure Layer — process-level resources and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain calculation logic from core/
    - Shared mutable state (the result cache) is guarded here, not in core/

Design Decisions:
    - Clock injected as a plain callable: deterministic tests without sleeps
"""
