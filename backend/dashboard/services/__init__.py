"""Services Layer — form actions orchestrating validation, persistence and cache invalidation.

Invariants:
    - Actions never raise validation or persistence failures past their boundary
    - Each action issues at most one store statement

Design Decisions:
    - One file per action family for locality (invoices, authentication)
"""
