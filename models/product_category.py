from sqlalchemy import Column, Integer, String

from models.base_model import base


class ProductCategoryModel(base):
    __tablename__ = "product_category"

    idproduct_category = Column(Integer, primary_key=True, autoincrement=True)
    product_category_name = Column(String(255), nullable=False)
