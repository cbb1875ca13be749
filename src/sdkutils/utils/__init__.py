"""Stateless helpers for client code.

Scope:
- Small, pure functions with no I/O and no retained state.
- One single-purpose module per concern: ``encoding.py`` (query strings and
  path templates), ``sequences.py`` (search and removal), ``predicates.py``
  (runtime type checks), ``keys.py`` (option-key validation) and
  ``compare.py`` (deep structural equality).

Import direction:
- May be imported by any SDKUTILS package.
- Must only depend on the standard library and :mod:`sdkutils.errors`.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules to avoid incidental coupling.
"""
