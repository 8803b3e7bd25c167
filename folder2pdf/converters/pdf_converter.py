# folder2pdf/converters/pdf_converter.py
"""PDF作成モジュール"""

import io
from pathlib import Path
from typing import Optional

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..exceptions import DecodeError, Folder2PdfError, SaveError
from .base import LoadedImage, Page


class ReportLabDocumentBuilder:
    """
    reportlab でPDFを組み立てる

    ページはメモリ上に組み立て、save() で一度だけファイルに書き出す。
    save() 前に失敗した場合、出力ファイルは作成されない。

    Attributes:
        title: Titleメタデータ
        author: Authorメタデータ
        page_count: 追加済みページ数
    """

    def __init__(self, title: str = "", author: str = ""):
        self.title = title
        self.author = author
        self.page_count = 0
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer)
        self._canvas.setTitle(title)
        self._canvas.setAuthor(author)
        self._current: Optional[Page] = None
        self._saved = False

    def add_page(self, width: float, height: float) -> Page:
        """
        指定サイズのページを追加する

        Args:
            width: 幅（ポイント）
            height: 高さ（ポイント）

        Returns:
            追加したページ
        """
        if self._saved:
            raise Folder2PdfError("Cannot add a page to a document that has already been saved.")
        if width <= 0 or height <= 0:
            raise ValueError(f"Page size must be positive, got {width} x {height}")

        # 前のページを確定させる
        if self._current is not None:
            self._canvas.showPage()

        self._canvas.setPageSize((width, height))
        self.page_count += 1
        self._current = Page(number=self.page_count, width=width, height=height)
        return self._current

    def draw_image(self, page: Page, image: LoadedImage, x: float, y: float,
                   width: float, height: float) -> None:
        """
        現在のページに画像を描画する

        Args:
            page: add_page() が返した最新のページ
            image: 読み込み済み画像
            x, y: 左下の座標（ポイント）
            width, height: 描画サイズ（ポイント）
        """
        if page != self._current:
            raise Folder2PdfError(f"Page {page.number} is not the current page.")
        try:
            self._canvas.drawImage(ImageReader(image.source), x, y, width=width, height=height, mask='auto')
        except Exception as e:
            # 描画できなかったページは空白で残さず、次の add_page() で使い回す
            self.page_count -= 1
            self._current = None
            raise DecodeError(image.path, e) from e

    def save(self, path: Path) -> Path:
        """
        PDFをファイルに書き出す

        Args:
            path: 出力先

        Returns:
            書き出したファイルのパス

        Raises:
            SaveError: 書き出しに失敗した場合
        """
        path = Path(path)
        if self._saved:
            raise SaveError(path, message="The document has already been saved.")
        self._saved = True

        try:
            if self._current is not None:
                self._canvas.showPage()
            self._canvas.save()
            path.write_bytes(self._buffer.getvalue())
        except Exception as e:
            raise SaveError(path, e) from e
        finally:
            self._buffer.close()
        return path
