"""Public package surface for cursorhistory.

Exports ``main`` for programmatic CLI invocation.
The history engine lives in ``cursorhistory.history`` and the host-facing
session in ``cursorhistory.runtime``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
