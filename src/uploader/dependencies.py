"""FastAPI dependencies reading the objects built once in ``create_app``."""

from fastapi import Request

from uploader.storage import StoreDirectory
from uploader.templates import PageRenderer


def get_store(request: Request) -> StoreDirectory:
    return request.app.state.store


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer
