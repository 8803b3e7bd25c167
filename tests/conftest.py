# tests/conftest.py
"""共通フィクスチャ"""

import logging
from pathlib import Path
from typing import Callable, Optional

import pytest
from PIL import Image

from folder2pdf.converters import Page
from folder2pdf.logger import LOGGER_NAME


def pattern_image(size=(32, 24), mode="RGB") -> Image.Image:
    """画素ごとに色が違うテスト画像を作る"""
    width, height = size
    img = Image.new("RGB", size)
    img.putdata([
        ((x * 7) % 256, (y * 11) % 256, ((x + y) * 3) % 256)
        for y in range(height) for x in range(width)
    ])
    if mode == "RGBA":
        img.putalpha(Image.linear_gradient("L").resize(size))
        return img
    return img.convert(mode) if mode != "RGB" else img


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """画像を置くフォルダ"""
    folder = tmp_path / "images"
    folder.mkdir()
    return folder


@pytest.fixture
def make_image(image_dir: Path) -> Callable[..., Path]:
    """拡張子に応じた形式で画像ファイルを作成する"""
    def _create(name: str, size=(32, 24), dpi: Optional[tuple] = None,
                folder: Optional[Path] = None, mode: str = "RGB") -> Path:
        path = (folder or image_dir) / name
        img = pattern_image(size, mode)
        kwargs = {}
        if dpi is not None:
            kwargs['dpi'] = dpi
        if path.suffix.lower() == '.webp':
            kwargs['lossless'] = True
        img.save(path, **kwargs)
        return path

    return _create


@pytest.fixture
def make_corrupt_file(image_dir: Path) -> Callable[[str], Path]:
    """画像の拡張子を持つ壊れたファイルを作成する"""
    def _create(name: str) -> Path:
        path = image_dir / name
        path.write_bytes(b"this is not an image")
        return path

    return _create


class RecordingBuilder:
    """呼び出しを記録するだけのPDFビルダー"""

    def __init__(self, title: str = "", author: str = ""):
        self.title = title
        self.author = author
        self.page_count = 0
        self.pages = []
        self.draws = []
        self.saved_to = None

    def add_page(self, width: float, height: float) -> Page:
        self.page_count += 1
        page = Page(number=self.page_count, width=width, height=height)
        self.pages.append(page)
        return page

    def draw_image(self, page, image, x, y, width, height):
        self.draws.append((page.number, image.path.name, x, y, width, height))

    def save(self, path: Path) -> Path:
        self.saved_to = path
        path.write_bytes(b"%PDF-1.4\n%recorded\n")
        return path


@pytest.fixture
def recording_builder():
    """RecordingBuilder のファクトリと、作成されたインスタンスの一覧"""
    created = []

    def _factory(title: str = "", author: str = "") -> RecordingBuilder:
        builder = RecordingBuilder(title=title, author=author)
        created.append(builder)
        return builder

    _factory.created = created
    return _factory


@pytest.fixture(autouse=True)
def reset_logger():
    """setup_logging() が追加したハンドラをテストごとに外す"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
