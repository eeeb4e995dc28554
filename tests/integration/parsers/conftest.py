import zipfile
from pathlib import Path

import pytest

ROW_COUNT = 5000


def _write_export(path: Path) -> None:
    """Writes a large export with one self-closing row per line."""
    with open(path, "w", encoding="utf-8") as f:
        f.write('<?xml version="1.0" encoding="utf-8"?>\n<export>\n')
        for i in range(ROW_COUNT):
            f.write(
                f'  <row id="{i:05d}" name="Produit&nbsp;{i} é" price="{i}.50" '
                f'note="null"/>\n'
            )
        f.write("</export>\n")


def _write_archive(path: Path, export: Path) -> None:
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("docs/readme.txt", "not xml " * 10_000)
        archive.write(export, "exports/rows.xml")
        archive.writestr("small.xml", '<data><row id="x"/><<row id="y"/></data>')
        archive.writestr("image.jpg", bytes(range(256)) * 100)


@pytest.fixture(scope="module")
def data_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create the export file and the archive once per module."""
    dir_path: Path = tmp_path_factory.mktemp("exports")

    _write_export(dir_path / "rows.xml")
    _write_archive(dir_path / "bundle.zip", dir_path / "rows.xml")

    return dir_path


@pytest.fixture(scope="module")
def row_count() -> int:
    return ROW_COUNT
