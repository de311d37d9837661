"""Core Layer — pure domain logic, no IO, no async, no shared state.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the cache and the clock
      live in the shell, the arithmetic lives here
"""
