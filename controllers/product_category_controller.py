"""Product category page controller."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from config.database import get_db
from config.templates import templates
from middleware.error_handler import unwrap_or_raise
from services.product_category_service import ProductCategoryService
from services.validation import PTYPE

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "dbslimdemo_main.html"


class ProductCategoryController:
    """
    Lists product categories and adds new ones through a form.

    The page is served at /page and, under its original name, at /dbslimdemo.
    Storage failures are not handled here; they are raised to the app's
    exception handlers.
    """

    def __init__(self, paths=("/page", "/dbslimdemo")):
        self.paths = paths
        self.router = APIRouter(tags=["Product Categories"])
        self._register_routes()

    def _register_routes(self):
        for path in self.paths:
            self.router.add_api_route(
                path,
                self.index,
                methods=["GET"],
                response_class=HTMLResponse,
                status_code=status.HTTP_200_OK,
            )
            self.router.add_api_route(
                path,
                self.business,
                methods=["POST"],
                response_class=HTMLResponse,
                status_code=status.HTTP_200_OK,
            )
        logger.debug(f"ProductCategoryController: Registered {len(self.router.routes)} routes.")

    def index(self, request: Request, db: Session = Depends(get_db)):
        """Render the current category list."""
        logger.info(f"Product category page requested: {request.url.path}")
        service = ProductCategoryService(db)
        view = unwrap_or_raise(service.show_page())
        return self._render(request, view)

    def business(
        self,
        request: Request,
        ptype: Optional[str] = Form(None, alias=PTYPE),
        db: Session = Depends(get_db),
    ):
        """Validate the submitted category, store it if valid and re-render the page."""
        service = ProductCategoryService(db)
        view = unwrap_or_raise(service.submit(ptype))
        return self._render(request, view)

    @staticmethod
    def _render(request: Request, view):
        return templates.TemplateResponse(request, PAGE_TEMPLATE, view.model_dump())
