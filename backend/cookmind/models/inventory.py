"""
Pydantic models for inventory items and product tagging.

This module defines the basic pantry items seeded into every inventory,
the result of checking a recipe ingredient against their variants, and
the request/response schemas for the inventory and product endpoints.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class BasicInventoryItem(BaseModel):
    """
    A pantry staple every user is assumed to start with.

    Attributes:
        name: Display name (e.g., "Olijfolie")
        category: Inventory category (e.g., "Oliën")
        quantity: Default quantity
        unit: Unit of measurement
    """
    name: str = Field(..., min_length=1, description="Item name")
    category: str = Field(..., description="Inventory category")
    quantity: float = Field(1, ge=0, description="Default quantity")
    unit: Optional[str] = Field(None, description="Unit of measurement")


class VariantCheckResult(BaseModel):
    """
    Whether a recipe ingredient is a variant of a basic item the user has.

    ``basic_item`` and ``variant`` are only set when ``is_variant`` is True.

    Attributes:
        is_variant: The ingredient can be covered by a basic item in stock
        basic_item: Name of that basic item (e.g., "Olijfolie")
        variant: The recipe ingredient as given (e.g., "Zonnebloemolie")
    """
    is_variant: bool = Field(False, description="Ingredient is a basic item variant")
    basic_item: Optional[str] = Field(None, description="Basic item in stock")
    variant: Optional[str] = Field(None, description="Recipe ingredient as given")

    model_config = {
        "json_schema_extra": {
            "example": {
                "is_variant": True,
                "basic_item": "Olijfolie",
                "variant": "Zonnebloemolie"
            }
        }
    }


class VariantCheckRequest(BaseModel):
    """Request model for the /inventory/variant-check endpoint."""
    ingredient: str = Field(..., description="Recipe ingredient", examples=["Zonnebloemolie"])
    inventory: List[str] = Field(
        default_factory=list,
        description="Ingredient names the user has",
        examples=[["Olijfolie", "pasta"]]
    )


class ProductTagRequest(BaseModel):
    """Request model for the /products/tag endpoint."""
    product_name: str = Field(
        ...,
        description="Product name as sold",
        examples=["AH Biologisch Rode Paprika"]
    )
    categories: Optional[List[str]] = Field(
        None,
        description="Open Food Facts category tags, if known",
        examples=[["en:plant-based-foods", "en:vegetables"]]
    )


class ProductTagResponse(BaseModel):
    """Response model for the /products/tag endpoint."""
    product_name: str
    tag: Optional[str] = Field(None, description="Suggested standard ingredient tag")
