"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `or_models.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .explorer_error import ExplorerError
from .structural_validation_error import StructuralValidationError, Violation
from .cache_miss_error import CacheMissError
from .cache_corrupt_error import CacheCorruptError
from .network_error import NetworkError
from .fatal_error import FatalError
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "ExplorerError",
    "StructuralValidationError",
    "Violation",
    "CacheMissError",
    "CacheCorruptError",
    "NetworkError",
    "FatalError",
    "classify_exception",
]
