"""Pydantic Schemas — request/response shapes at the HTTP boundary.

Invariants:
    - Schemas validate at system boundary (form input, API responses)

Design Decisions:
    - Invoice form validation lives in core/invoice_validation.py (field-level
      messages the form expects); schemas here only shape responses and
      sign-in credentials
"""
