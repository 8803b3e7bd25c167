# folder2pdf/logger.py
"""ログ機構モジュール"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOGGER_NAME = "folder2pdf"


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    ログ機構をセットアップする

    進捗行（Processed: ...）はユーザー向けの出力なので標準出力に流す。
    ログファイルは指定された場合のみ作成する。

    Args:
        verbose: 詳細ログ出力フラグ
        quiet: コンソール出力抑制フラグ
        log_file: ログファイルのパス（省略時は作成しない）

    Returns:
        設定済みのロガー
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    # ロガー設定
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file else log_level)

    # 既存ハンドラをクリア
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # ファイルハンドラ
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter('%(asctime)s | %(levelname)-8s | %(message)s')
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    # コンソールハンドラ
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.CRITICAL if quiet else log_level)
    console_format = logging.Formatter('%(message)s')
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if log_file is not None:
        logger.debug(f"Log file: {log_file}")
    return logger


def get_logger() -> logging.Logger:
    """アプリケーションロガーを取得"""
    return logging.getLogger(LOGGER_NAME)
