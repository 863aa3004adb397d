"""Unified explorer error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``or_models.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.explorer_error import ExplorerError
from .errors_parts.structural_validation_error import StructuralValidationError, Violation
from .errors_parts.cache_miss_error import CacheMissError
from .errors_parts.cache_corrupt_error import CacheCorruptError
from .errors_parts.network_error import NetworkError
from .errors_parts.fatal_error import FatalError
from .errors_parts.classification import classify_exception

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
