# folder2pdf/processors/__init__.py
"""ファイル処理モジュール"""

from .file_processor import is_supported_image, list_image_files
from .natural_sort import natural_compare, natural_sort_key

__all__ = [
    'is_supported_image',
    'list_image_files',
    'natural_compare',
    'natural_sort_key',
]
