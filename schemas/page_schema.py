"""View model for the product category page."""
from typing import Dict, List, Optional

from pydantic import Field, model_validator

from schemas.base_schema import BaseSchema
from schemas.product_category_schema import ProductCategorySchema


class PageViewModel(BaseSchema):
    """
    Data bag rendered by dbslimdemo_main.html.

    page_array is always present. A page carries either a status message
    (after a successful insert) or error messages (after a rejected
    submission), never both.
    """

    page_array: List[ProductCategorySchema] = Field(default_factory=list)
    status_message: Optional[str] = None
    ptype: Optional[str] = None
    error_messages: Optional[Dict[str, str]] = None

    @model_validator(mode="after")
    def check_status_or_errors(self):
        if self.status_message is not None and self.error_messages:
            raise ValueError("status_message and error_messages are mutually exclusive")
        return self
