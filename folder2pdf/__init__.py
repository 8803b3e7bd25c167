# folder2pdf
# Folder of images to a single PDF converter

__version__ = "1.0.0"

from .config import Config
from .logger import setup_logging
from .summary import ConversionSummary, FileResult
from .processors import natural_compare, natural_sort_key, list_image_files
from .utils import get_unique_path, resolve_output_path
from .converters import PillowImageDecoder, ReportLabDocumentBuilder
from .main import convert_folder, run

__all__ = [
    'Config',
    'setup_logging',
    'ConversionSummary',
    'FileResult',
    'natural_compare',
    'natural_sort_key',
    'list_image_files',
    'get_unique_path',
    'resolve_output_path',
    'PillowImageDecoder',
    'ReportLabDocumentBuilder',
    'convert_folder',
    'run',
]
