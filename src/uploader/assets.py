"""Select where templates and static files come from.

Bundled assets ship inside the package (``uploader/tpl`` and
``uploader/static``); with ``embed_assets`` off the same directory names are
looked up in the current working directory instead, which makes editing the
page possible without reinstalling.
"""

from pathlib import Path

from jinja2 import BaseLoader, FileSystemLoader, PackageLoader

from uploader.errors import StartupError

TEMPLATE_DIR = "tpl"
STATIC_DIR = "static"

PACKAGE_ROOT = Path(__file__).parent


def _asset_dir(name: str, embed: bool) -> Path:
    root = PACKAGE_ROOT if embed else Path.cwd()
    path = root / name
    if not path.is_dir():
        raise StartupError(f"asset directory not found: {path}")
    return path


def select_template_loader(embed: bool) -> BaseLoader:
    """Jinja2 loader over the bundled or the on-disk ``tpl`` directory."""
    if embed:
        try:
            return PackageLoader("uploader", TEMPLATE_DIR)
        except ValueError as e:
            raise StartupError(f"bundled templates not found: {e}") from e
    return FileSystemLoader(str(_asset_dir(TEMPLATE_DIR, embed=False)))


def select_static_dir(embed: bool) -> Path:
    """Directory served under ``/static``."""
    return _asset_dir(STATIC_DIR, embed)
