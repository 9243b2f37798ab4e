"""
Pydantic schemas for the product catalog.

These models define the records that flow into the report generator
and the enriched entries it produces.
"""

from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    """Pricing tier assigned to a report entry."""
    STANDARD = "Standard"
    PREMIUM = "Premium"


class Category(BaseModel):
    """A product category carrying a discount factor."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique category identifier")
    discount: Decimal = Field(
        default=Decimal("0"),
        description="Fractional price reduction, expected in [0, 1]",
    )


class Product(BaseModel):
    """
    A single catalog product.

    The category reference is a plain foreign key and is allowed to point
    at a category that does not exist; the report treats such products
    as undiscounted.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Display name")
    category_id: int = Field(..., description="Identifier of the owning category")
    price: Decimal = Field(..., description="Base price, expected to be non-negative")


class ReportEntry(BaseModel):
    """One row of the inventory report."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Identifier of the source product")
    name: str = Field(..., description="Display name of the source product")
    discounted_price: Decimal = Field(..., description="Price after discount, rounded to cents")
    tier: Tier = Field(..., description="Tier derived from the discounted price")

    def to_row(self) -> dict:
        """Flatten the entry into plain values for tabular output."""
        return {
            "id": self.id,
            "name": self.name,
            "discounted_price": float(self.discounted_price),
            "tier": self.tier.value,
        }
