"""Entrypoints (inbound adapters) for SDKUTILS.

Expose the helpers to the outside world. Currently only the ``sdkutils``
command line; parse and validate inputs, call :mod:`sdkutils.utils`, and
present results.
"""
