import pytest
from jinja2 import FileSystemLoader, PackageLoader

from uploader.assets import PACKAGE_ROOT, select_static_dir, select_template_loader
from uploader.errors import StartupError


def test_bundled_sources():
    assert isinstance(select_template_loader(embed=True), PackageLoader)
    assert select_static_dir(embed=True) == PACKAGE_ROOT / "static"
    assert (select_static_dir(embed=True) / "style.css").is_file()


def test_on_disk_sources_come_from_working_directory(tmp_path, monkeypatch):
    (tmp_path / "tpl").mkdir()
    (tmp_path / "static").mkdir()
    monkeypatch.chdir(tmp_path)

    loader = select_template_loader(embed=False)

    assert isinstance(loader, FileSystemLoader)
    assert loader.searchpath == [str(tmp_path / "tpl")]
    assert select_static_dir(embed=False) == tmp_path / "static"


def test_on_disk_sources_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(StartupError, match="asset directory not found"):
        select_template_loader(embed=False)
    with pytest.raises(StartupError, match="asset directory not found"):
        select_static_dir(embed=False)
