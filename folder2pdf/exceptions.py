# folder2pdf/exceptions.py
"""例外定義モジュール"""

from pathlib import Path
from typing import Optional


class Folder2PdfError(Exception):
    """folder2pdf の全例外の基底クラス"""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown error occurred while creating the PDF."


class InputDirectoryNotFoundError(Folder2PdfError):
    """入力フォルダが存在しない"""

    @property
    def default_message(self) -> str:
        return "The specified folder was not found."


class NoSupportedImagesError(Folder2PdfError):
    """対応する画像ファイルが1つもない"""

    @property
    def default_message(self) -> str:
        return "No supported image files found in the specified folder."


class NoPagesConvertedError(Folder2PdfError):
    """全ての画像の読み込みに失敗し、PDFにページがない"""

    @property
    def default_message(self) -> str:
        return "None of the image files could be decoded. No PDF was created."


class DecodeError(Folder2PdfError):
    """
    画像1枚の読み込み失敗

    Attributes:
        path: 失敗したファイルのパス
        cause: 元の例外
    """

    def __init__(self, path: Path, cause: Optional[BaseException] = None, message: str = "") -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(message or (str(cause) if cause else ""))

    @property
    def default_message(self) -> str:
        return f"Could not decode image: {self.path.name}"


class SaveError(Folder2PdfError):
    """
    PDFの書き出し失敗（出力フォルダ作成の失敗を含む）

    Attributes:
        path: 出力先のパス
        cause: 元の例外
    """

    def __init__(self, path: Path, cause: Optional[BaseException] = None, message: str = "") -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(message or (str(cause) if cause else ""))

    @property
    def default_message(self) -> str:
        return f"Could not write PDF: {self.path}"
