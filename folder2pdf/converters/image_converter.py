# folder2pdf/converters/image_converter.py
"""画像読み込みモジュール"""

import io
from pathlib import Path
from typing import Iterable, Optional, Tuple

from PIL import Image

from ..exceptions import DecodeError
from .base import LoadedImage


def read_dpi(info: dict, default_dpi: float) -> Tuple[float, float]:
    """
    画像のメタデータから (横, 縦) DPI を取得する

    DPIがない、または0以下・数値でない場合は default_dpi を使う。

    Args:
        info: PIL.Image.info
        default_dpi: 既定のDPI

    Returns:
        (横DPI, 縦DPI)
    """
    dpi = info.get('dpi')
    if not isinstance(dpi, (tuple, list)) or len(dpi) < 2:
        return (default_dpi, default_dpi)

    result = []
    for value in dpi[:2]:
        try:
            value = float(value)
        except (TypeError, ValueError, ZeroDivisionError):
            value = 0.0
        result.append(value if value > 0 else default_dpi)
    return (result[0], result[1])


class PillowImageDecoder:
    """
    Pillowで画像を読み込むデコーダー

    JPEG/PNG/BMP/GIF/TIFF はファイルパスをそのままPDFライブラリに渡す。
    WebP はPDFライブラリが直接読めないため、PNG（可逆）に再エンコードした
    メモリ上のストリームを渡す。

    Attributes:
        default_dpi: 解像度情報がない画像に仮定するDPI
        reencode_extensions: PNGに再エンコードする拡張子
    """

    def __init__(self, default_dpi: float = 72.0, reencode_extensions: Optional[Iterable[str]] = None):
        self.default_dpi = default_dpi
        self.reencode_extensions = {
            ext.lower() for ext in (reencode_extensions if reencode_extensions is not None else {'.webp'})
        }

    def load(self, path: Path) -> LoadedImage:
        """
        画像を読み込む

        Args:
            path: 画像ファイルのパス

        Returns:
            LoadedImage

        Raises:
            DecodeError: 破損・未対応形式・読み込みエラー
        """
        path = Path(path)
        try:
            with Image.open(path) as img:
                # 遅延読み込みなので、ここで全体をデコードして破損を検出する
                img.load()
                width, height = img.size
                dpi = read_dpi(img.info, self.default_dpi)

                if path.suffix.lower() in self.reencode_extensions:
                    source = self._reencode_png(img)
                else:
                    source = str(path)
        except Exception as e:
            raise DecodeError(path, e) from e

        return LoadedImage(path=path, pixel_width=width, pixel_height=height, dpi=dpi, source=source)

    @staticmethod
    def _reencode_png(img: Image.Image) -> io.BytesIO:
        """画像をPNGとしてメモリ上に書き出す（可逆）"""
        # PNGで保存できないモード（CMYKなど）はRGB系に変換する
        if img.mode not in ('1', 'L', 'LA', 'I', 'P', 'RGB', 'RGBA'):
            img = img.convert('RGBA' if 'A' in img.getbands() else 'RGB')

        buffer = io.BytesIO()
        img.save(buffer, format='PNG')
        buffer.seek(0)
        return buffer
