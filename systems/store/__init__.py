"""
Lookup tables for the systems package.

The series registries live in systems.store.registry, which is not imported
here: the models import the builtin OS names from this package, and the
registry in turn needs the models.
"""

from systems.store.builtin import BUILTIN_SERIES, VALID_OS

__all__ = [
    "BUILTIN_SERIES",
    "VALID_OS",
]
