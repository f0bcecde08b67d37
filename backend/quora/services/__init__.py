"""Services Layer — question lifecycle service, SQL stores and token validator.

Invariants:
    - Stores and validator wrap one request-scoped AsyncSession each
    - QuestionService depends on store protocols, not on SQLAlchemy

Design Decisions:
    - One file per collaborator for locality
"""
