"""Page logic for listing and adding product categories."""
import logging
from typing import Any, Optional

from returns.pipeline import is_successful
from returns.result import Result
from sqlalchemy.orm import Session

from repositories.exceptions import StorageError
from repositories.product_category_repository import ProductCategoryRepository
from schemas.page_schema import PageViewModel
from services.validation import validate_ptype

logger = logging.getLogger(__name__)


class ProductCategoryService:
    """
    Builds the view model for the category page.

    Storage failures are passed through untouched as ``Failure(StorageError)``.
    """

    def __init__(self, session: Session):
        self.repository = ProductCategoryRepository(session)

    def show_page(self) -> Result[PageViewModel, StorageError]:
        return self.repository.list_categories().map(
            lambda categories: PageViewModel(page_array=categories)
        )

    def submit(self, ptype: Optional[Any]) -> Result[PageViewModel, StorageError]:
        """Validate a submitted category, insert it if valid and rebuild the page."""
        validation = validate_ptype(ptype)

        if not is_successful(validation):
            error_messages = validation.failure()
            logger.debug(f"Rejected product category {ptype!r}: {error_messages}")
            return self.repository.list_categories().map(
                lambda categories: PageViewModel(
                    page_array=categories,
                    ptype="" if ptype is None else str(ptype),
                    error_messages=error_messages,
                )
            )

        name = validation.unwrap()
        return (
            self.repository.insert_category(name)
            .map(lambda new_id: self._log_added(name, new_id))
            .bind(lambda _: self.repository.list_categories())
            .map(
                lambda categories: PageViewModel(
                    status_message=f"Product Category {name} added",
                    page_array=categories,
                )
            )
        )

    @staticmethod
    def _log_added(name: str, new_id: int) -> int:
        logger.info(f"Product category {name} added with id {new_id}")
        return new_id
