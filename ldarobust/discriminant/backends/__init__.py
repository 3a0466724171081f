"""
LDA backends.

Available backends:
    CPULDABackend: CPU reference implementation using a Cholesky solve
"""

from ldarobust.discriminant.backends.cpu import CPULDABackend

__all__ = [
    "CPULDABackend",
]
