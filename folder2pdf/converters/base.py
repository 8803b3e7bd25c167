# folder2pdf/converters/base.py
"""画像デコーダー / PDFビルダーのインターフェース定義"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, Union

# 1ポイント = 1/72インチ
POINTS_PER_INCH = 72.0


def pixels_to_points(pixels: int, dpi: float) -> float:
    """ピクセル数をDPIからポイントに換算する"""
    return pixels * POINTS_PER_INCH / dpi


@dataclass
class LoadedImage:
    """
    読み込み済みの画像

    with ブロックを抜けるとメモリ上のストリームを解放する。

    Attributes:
        path: 元画像のパス
        pixel_width: 横ピクセル数
        pixel_height: 縦ピクセル数
        dpi: 換算に使った (横, 縦) DPI
        source: PDFライブラリに渡す画像（ファイルパスまたはPNGストリーム）
    """
    path: Path
    pixel_width: int
    pixel_height: int
    dpi: tuple
    source: Union[str, io.BytesIO] = field(repr=False)

    @property
    def point_width(self) -> float:
        return pixels_to_points(self.pixel_width, self.dpi[0])

    @property
    def point_height(self) -> float:
        return pixels_to_points(self.pixel_height, self.dpi[1])

    def close(self) -> None:
        if isinstance(self.source, io.BytesIO):
            self.source.close()

    def __enter__(self) -> LoadedImage:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@dataclass(frozen=True)
class Page:
    """PDFの1ページ（番号は1始まり）"""
    number: int
    width: float
    height: float


class ImageDecoder(Protocol):
    """画像読み込みのインターフェース"""

    def load(self, path: Path) -> LoadedImage:
        """画像を読み込む。失敗時は DecodeError を送出する。"""


class DocumentBuilder(Protocol):
    """PDF作成のインターフェース"""

    page_count: int

    def add_page(self, width: float, height: float) -> Page:
        """指定サイズ（ポイント）のページを末尾に追加する"""

    def draw_image(self, page: Page, image: LoadedImage, x: float, y: float,
                   width: float, height: float) -> None:
        """ページに画像を描画する"""

    def save(self, path: Path) -> Path:
        """PDFを書き出す。失敗時は SaveError を送出する。"""
