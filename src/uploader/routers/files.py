import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from uploader.dependencies import get_renderer, get_store
from uploader.errors import MalformedRequest
from uploader.storage import StoreDirectory
from uploader.templates import MAIN_TEMPLATE, PAGE_TITLE, PageModel, PageRenderer

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "upload"
MULTIPART_CONTENT_TYPE = "multipart/form-data"

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def list_files(
    store: StoreDirectory = Depends(get_store),
    renderer: PageRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """
    Render the listing page for the store directory.

    An unreadable store directory renders as an empty listing rather than
    an error page.
    """
    model = PageModel(title=PAGE_TITLE, files=store.list_entries())
    return HTMLResponse(renderer.render(MAIN_TEMPLATE, model))


@router.post("/", response_class=HTMLResponse)
async def upload_files(
    request: Request,
    store: StoreDirectory = Depends(get_store),
    renderer: PageRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """
    Store every file sent under the ``upload`` field, then show the listing.

    Files are written in the order received. If one of them fails (bad name,
    unwritable destination) the request stops there; files written before it
    are kept.
    """
    content_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if content_type != MULTIPART_CONTENT_TYPE:
        raise MalformedRequest(f"request Content-Type isn't {MULTIPART_CONTENT_TYPE}: {content_type!r}")

    try:
        form = await request.form()
    except Exception as e:
        raise MalformedRequest(f"cannot parse multipart form: {e}") from e

    # Parts without a filename are plain form values, not files
    parts = [
        item for item in form.getlist(UPLOAD_FIELD)
        if isinstance(item, UploadFile) and item.filename
    ]

    try:
        for part in parts:
            await run_in_threadpool(store.write, part.filename, part.file)
    finally:
        await form.close()

    if parts:
        logger.info(f"Uploaded {len(parts)} file(s) to {store.path}")
    return list_files(store=store, renderer=renderer)
