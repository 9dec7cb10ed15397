"""Page rendering with Jinja2."""

import logging
from typing import List

from jinja2 import BaseLoader, Environment, TemplateError, select_autoescape
from pydantic import BaseModel, Field

from uploader.errors import StartupError

logger = logging.getLogger(__name__)

LAYOUT_TEMPLATE = "layout.html"
MAIN_TEMPLATE = "main.html"
PAGE_TITLE = "Uploader"


class PageModel(BaseModel):
    """Data bound to the listing page."""
    title: str = Field(default=PAGE_TITLE, description="Page title")
    files: List[str] = Field(default_factory=list, description="Names found in the store directory")


class PageRenderer:
    """
    Binds a model to a named view composed with a shared layout.

    Where templates are read from is decided by the ``loader`` given here;
    the renderer itself treats it as a read-only source. Every view listed in
    ``views`` is parsed up front so a missing or broken template stops the
    application at startup instead of failing requests.
    """

    def __init__(self, loader: BaseLoader, views: tuple = (LAYOUT_TEMPLATE, MAIN_TEMPLATE)):
        self.env = Environment(
            loader=loader,
            autoescape=select_autoescape(["html"]),
        )
        try:
            self._templates = {name: self.env.get_template(name) for name in views}
        except TemplateError as e:
            raise StartupError(f"cannot load template: {e}") from e
        logger.debug(f"Loaded templates: {', '.join(views)}")

    def render(self, view: str, model: BaseModel) -> bytes:
        """Render ``view`` with the fields of ``model`` as template variables."""
        template = self._templates.get(view) or self.env.get_template(view)
        return template.render(**model.model_dump()).encode("utf-8")
