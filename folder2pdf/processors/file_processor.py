# folder2pdf/processors/file_processor.py
"""画像ファイル列挙モジュール"""

from pathlib import Path
from typing import Iterable, List

from .natural_sort import natural_sort_key


def is_supported_image(file_path: Path, extensions: Iterable[str]) -> bool:
    """
    拡張子から変換対象の画像かどうか判定する（大文字小文字は区別しない）

    Args:
        file_path: 対象ファイルのパス
        extensions: 対応拡張子（'.png' 形式）

    Returns:
        対応拡張子ならTrue
    """
    return file_path.suffix.lower() in {ext.lower() for ext in extensions}


def list_image_files(folder: Path, extensions: Iterable[str]) -> List[Path]:
    """
    フォルダ直下の画像ファイルを自然順で列挙する

    サブフォルダは辿らない。並び順はファイル名の自然順。

    Args:
        folder: 入力フォルダ
        extensions: 対応拡張子

    Returns:
        ソート済みの画像ファイルパスのリスト
    """
    extensions = {ext.lower() for ext in extensions}
    image_files = [
        entry for entry in folder.iterdir()
        if entry.is_file() and is_supported_image(entry, extensions)
    ]
    return sorted(image_files, key=lambda p: natural_sort_key(p.name))
