"""Core Layer — pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Validation and parsing functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the store returns
      typed results, the HTTP layer decides how to render them
"""
