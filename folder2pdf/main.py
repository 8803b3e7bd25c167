# folder2pdf/main.py
"""メイン処理モジュール"""

import sys
from pathlib import Path
from typing import Callable, Optional

from tqdm import tqdm

from .cli import setup_args
from .config import Config
from .converters import DocumentBuilder, ImageDecoder, PillowImageDecoder, ReportLabDocumentBuilder
from .exceptions import (
    DecodeError,
    NoPagesConvertedError,
    NoSupportedImagesError,
    SaveError,
)
from .logger import get_logger, setup_logging
from .processors import list_image_files
from .summary import ConversionSummary, FileResult
from .utils import clean_user_path, resolve_output_path


# 対話モードのメッセージ
BANNER = "--- Image to PDF Converter ---"
FOLDER_PROMPT = "Please enter the path to the image folder: "
FOLDER_NOT_FOUND = "Error: The specified folder was not found. Please try again."
OUTPUT_PROMPT = ("Enter the output PDF filename or full path "
                 "(optional, defaults to 'output.pdf' in the source folder): ")
EXIT_PROMPT = "\nPress Enter to exit..."


def convert_folder(
    input_dir: Path,
    output_path: Path,
    config: Optional[Config] = None,
    decoder: Optional[ImageDecoder] = None,
    builder_factory: Optional[Callable[..., DocumentBuilder]] = None,
) -> ConversionSummary:
    """
    フォルダ内の画像を1つのPDFにまとめる

    読み込めない画像はログに記録して飛ばし、残りの画像で処理を続ける。

    Args:
        input_dir: 入力フォルダ
        output_path: 出力PDFのパス
        config: 設定オブジェクト
        decoder: 画像デコーダー（省略時は Pillow）
        builder_factory: title/author を受け取ってビルダーを返す関数（省略時は reportlab）

    Returns:
        変換サマリー

    Raises:
        NoSupportedImagesError: 対応画像が1つもない
        NoPagesConvertedError: 全ての画像の読み込みに失敗した
        SaveError: 出力フォルダの作成またはPDFの書き出しに失敗した
    """
    logger = get_logger()
    config = config or Config()
    decoder = decoder or PillowImageDecoder(default_dpi=config.default_dpi,
                                            reencode_extensions=config.webp_extensions)
    builder_factory = builder_factory or ReportLabDocumentBuilder

    image_files = list_image_files(input_dir, config.supported_extensions)
    if not image_files:
        raise NoSupportedImagesError()

    logger.info(f"Found {len(image_files)} image file(s). Preparing to convert...")
    logger.info(f"PDF will be saved to: {output_path}")

    summary = ConversionSummary(input_dir=str(input_dir), output_path=str(output_path))

    # Dry-run モード
    if config.dry_run:
        logger.info("=== DRY-RUN MODE ===")
        logger.info("Following images would be converted (in page order):")
        for image_path in image_files:
            logger.info(f"  - {image_path.name}")
        logger.info("Dry-run complete. No PDF was created.")
        return summary

    # 出力フォルダ作成
    output_dir = output_path.parent
    if not output_dir.is_dir():
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SaveError(output_path, e) from e
        logger.debug(f"Created output folder: {output_dir}")

    builder = builder_factory(title=output_path.stem, author=config.author)

    file_iterator = image_files
    if config.show_progress:
        file_iterator = tqdm(image_files, desc="Converting images", unit="image",
                             leave=False, dynamic_ncols=True)

    for image_path in file_iterator:
        if isinstance(file_iterator, tqdm):
            name = image_path.name
            file_iterator.set_postfix_str(name[:30] + '...' if len(name) > 30 else name)

        try:
            with decoder.load(image_path) as image:
                page = builder.add_page(image.point_width, image.point_height)
                builder.draw_image(page, image, 0, 0, page.width, page.height)
        except DecodeError as e:
            logger.warning(f"Error processing file {image_path.name}: {e.message}")
            summary.add_result(FileResult(path=str(image_path), status="error", error_message=e.message))
            continue

        logger.debug(f"  page {page.number}: {page.width:.2f} x {page.height:.2f} pt "
                     f"({image.pixel_width} x {image.pixel_height} px)")
        logger.info(f"Processed: {image_path.name}")
        summary.add_result(FileResult(path=str(image_path), status="converted",
                                      page=page.number, width=page.width, height=page.height))

    if builder.page_count == 0:
        raise NoPagesConvertedError()

    builder.save(output_path)
    summary.saved = True
    return summary


def prompt_for_folder(input_func: Callable[[str], str] = input) -> Path:
    """
    存在するフォルダが入力されるまで尋ね続ける

    Args:
        input_func: 入力関数

    Returns:
        入力フォルダのパス
    """
    while True:
        value = clean_user_path(input_func(FOLDER_PROMPT))
        if value:
            folder = Path(value).expanduser()
            if folder.is_dir():
                return folder
        print(FOLDER_NOT_FOUND)


def wait_for_exit(config: Config, input_func: Callable[[str], str] = input):
    """対話モードでは終了前にキー入力を待つ"""
    if not config.pause:
        return
    try:
        input_func(EXIT_PROMPT)
    except EOFError:
        # 標準入力が閉じている場合は待つ相手がいない
        pass


def _report_summary(summary: ConversionSummary):
    logger = get_logger()
    logger.info(f"\nConverted {summary.converted} of {summary.total_files} image(s).")
    failed = summary.failed_files
    if failed:
        logger.warning("\n[!] IMAGES THAT COULD NOT BE CONVERTED")
        logger.warning("-" * 60)
        for path in failed:
            logger.warning(f"  - {Path(path).name}")
        logger.warning("-" * 60)
        logger.warning(f"  Total: {len(failed)} file(s)")


def run(argv=None, input_func: Callable[[str], str] = input) -> int:
    """
    メインエントリーポイント

    Args:
        argv: コマンドライン引数（省略時は sys.argv）
        input_func: 入力関数

    Returns:
        終了コード（0=成功）
    """
    args = setup_args(argv)

    # 設定作成
    try:
        config = Config.from_args(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    # ログ設定
    log_file = Path(args.log_file) if args.log_file else None
    logger = setup_logging(verbose=config.verbose, quiet=config.quiet, log_file=log_file)
    logger.info(BANNER)

    if args.target_dir is None:
        input_dir = prompt_for_folder(input_func)
        user_output = args.output if args.output is not None else input_func(OUTPUT_PROMPT)
    else:
        input_dir = Path(clean_user_path(args.target_dir)).expanduser()
        if not input_dir.is_dir():
            logger.error(f"Error: Path '{input_dir}' not found.")
            return 1
        user_output = args.output

    try:
        output_path = resolve_output_path(input_dir, user_output, config.default_base_name)
        summary = convert_folder(input_dir, output_path, config)
    except (NoSupportedImagesError, NoPagesConvertedError) as e:
        logger.error(f"Error: {e.message}")
        wait_for_exit(config, input_func)
        return 1
    except SaveError as e:
        logger.error(f"\nAn unexpected error occurred while creating the PDF: {e.message}")
        wait_for_exit(config, input_func)
        return 1

    if summary.saved:
        _report_summary(summary)
        logger.info("\nPDF file created successfully!")

    # サマリー保存
    if args.report:
        try:
            report_file = summary.save(Path(args.report))
        except OSError as e:
            logger.error(f"Error: could not write report: {e}")
            wait_for_exit(config, input_func)
            return 1
        logger.info(f"Report saved to: {report_file}")

    wait_for_exit(config, input_func)
    return 0


def main():
    """console_scripts 用エントリーポイント"""
    try:
        sys.exit(run())
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled.")
        sys.exit(130)
