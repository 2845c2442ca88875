"""Integration tests.

Integration tests exercise the full stack: building a field, editing
cells through it and filtering and sorting the results. They are kept
in a separate directory so they can be excluded from the fast unit-test
run with ``pytest tests/unit/``.
"""
from __future__ import annotations
