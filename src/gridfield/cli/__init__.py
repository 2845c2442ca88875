"""CLI package.

The ``cli`` sub-package contains the Click application.  It works on
type-option documents loaded from disk and only uses the public API of
the parent package.
"""
from __future__ import annotations
