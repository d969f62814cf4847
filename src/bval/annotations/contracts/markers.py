# bval/annotations/contracts/markers.py
"""
Group and payload markers.

Markers are opaque to the annotation builder: they are stored in the
``groups`` and ``payload`` elements exactly as given and only interpreted by
the validation engine.
"""
from __future__ import annotations


class Default:
    """Group a constraint belongs to when no group is declared."""


class Payload:
    """Base class for payload markers attached to a constraint."""
