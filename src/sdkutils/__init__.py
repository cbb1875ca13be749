"""SDKUTILS

Small, stateless helpers shared by HTTP client code: URL parameter and path
encoding, sequence search/removal, type predicates, option-key validation
and a recursive deep-equality comparator.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
