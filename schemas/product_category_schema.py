"""Product category row schema."""
from pydantic import AliasChoices, Field

from schemas.base_schema import BaseSchema


class ProductCategorySchema(BaseSchema):
    """One row of product_category as handed to the page template."""

    id: int = Field(
        ...,
        validation_alias=AliasChoices("idproduct_category", "id"),
        description="Generated by the store, never changes",
    )
    name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("product_category_name", "name"),
    )
