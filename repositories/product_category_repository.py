"""Repository for the product_category table."""
import logging
from typing import List

from returns.result import Failure, Result, Success
from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.product_category import ProductCategoryModel
from repositories.exceptions import StorageError
from schemas.product_category_schema import ProductCategorySchema

logger = logging.getLogger(__name__)

_table = ProductCategoryModel.__table__

# No ORDER BY: rows come back in whatever order the store returns them.
LIST_CATEGORIES = select(_table.c.idproduct_category, _table.c.product_category_name)


class ProductCategoryRepository:
    """
    Runs the two statements the category page needs. Each write is committed
    on its own, like an autocommitted statement.

    Every statement binds user input as a parameter. Store failures are not
    handled here: they come back as ``Failure(StorageError)`` for the request
    boundary to deal with.
    """

    def __init__(self, session: Session):
        self.session = session

    def list_categories(self) -> Result[List[ProductCategorySchema], StorageError]:
        try:
            rows = self.session.execute(LIST_CATEGORIES).mappings().all()
        except SQLAlchemyError as exc:
            return Failure(StorageError("Could not read product categories", original=exc))
        logger.debug(f"Fetched {len(rows)} product categories")
        return Success([ProductCategorySchema.model_validate(dict(row)) for row in rows])

    def insert_category(self, name: str) -> Result[int, StorageError]:
        """
        Insert one category, commit it and return the id generated by the store.

        A failed commit comes back as a Failure, the same as a failed INSERT.
        """
        statement = insert(_table).values(product_category_name=name)
        try:
            result = self.session.execute(statement)
            new_id = result.inserted_primary_key[0]
            self.session.commit()
        except SQLAlchemyError as exc:
            return Failure(StorageError(f"Could not insert product category {name!r}", original=exc))
        logger.debug(f"Inserted product category {new_id}")
        return Success(new_id)
