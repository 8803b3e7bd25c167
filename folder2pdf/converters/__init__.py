# folder2pdf/converters/__init__.py
"""ファイル変換モジュール"""

from .base import DocumentBuilder, ImageDecoder, LoadedImage, Page, pixels_to_points
from .image_converter import PillowImageDecoder, read_dpi
from .pdf_converter import ReportLabDocumentBuilder

__all__ = [
    'DocumentBuilder',
    'ImageDecoder',
    'LoadedImage',
    'Page',
    'pixels_to_points',
    'PillowImageDecoder',
    'read_dpi',
    'ReportLabDocumentBuilder',
]
