"""Core Layer — pure question rules, domain types, error hierarchy, boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: rules in core, IO in services
"""
