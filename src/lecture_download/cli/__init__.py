"""CLI layer — argument parsing, console output and the error boundary.

The outermost layer: it may import from ``core`` and ``infra``, but no
other layer may import from ``cli``.
"""
