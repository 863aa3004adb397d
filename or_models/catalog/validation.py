"""
Schema validation for decoded listing documents.

Purpose
-------
Turn an arbitrary decoded JSON value into an ordered list of
:class:`~or_models.base.dto.ModelRecord` or fail with a
:class:`~or_models.base.errors.StructuralValidationError` naming every violated
field. The declarative schema lives in :mod:`or_models.base.dto`; this module
only converts pydantic's error list into the explorer taxonomy.

Pure function: no I/O, no logging.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import ValidationError

from ..base.dto import ModelRecord, ModelsListing
from ..base.errors import StructuralValidationError, Violation


def _violations_from(exc: ValidationError) -> List[Violation]:
    """Flatten a pydantic ``ValidationError`` into explorer violations."""
    out: List[Violation] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in err.get("loc", ())) or "(root)"
        out.append(Violation(location=loc, message=str(err.get("msg", "")), type=str(err.get("type", ""))))
    return out


def validate_listing(raw: Any) -> List[ModelRecord]:
    """Validate a decoded ``{"data": [...]}`` document.

    Parameters
    ----------
    raw: Any
        Value produced by ``json.loads`` (or ``httpx.Response.json``).

    Returns
    -------
    List[ModelRecord]
        Records in document order.

    Raises
    ------
    StructuralValidationError
        When the value does not match the listing shape.
    """
    try:
        listing = ModelsListing.model_validate(raw)
    except ValidationError as exc:
        violations = _violations_from(exc)
        raise StructuralValidationError(
            message=f"data structure does not match expected schema ({len(violations)} violation(s))",
            raw=exc,
            violations=violations,
        ) from exc
    return list(listing.data)


__all__ = ["validate_listing"]
