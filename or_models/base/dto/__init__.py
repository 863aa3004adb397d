"""Pydantic DTOs describing the OpenRouter model listing.

One model per file; this package re-exports them for a stable import path.
"""

from .architecture import ArchitectureDTO
from .pricing import PricingDTO
from .top_provider import TopProviderDTO
from .model_record import ModelRecord
from .models_listing import ModelsListing

__all__ = [
    "ArchitectureDTO",
    "PricingDTO",
    "TopProviderDTO",
    "ModelRecord",
    "ModelsListing",
]
