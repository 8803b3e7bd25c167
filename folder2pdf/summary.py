# folder2pdf/summary.py
"""変換サマリーモジュール"""

import datetime
import json
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, List, Any


@dataclass
class FileResult:
    """
    個別画像の処理結果

    Attributes:
        path: 画像ファイルパス
        status: 処理ステータス（converted, error）
        page: 追加されたページ番号
        width: ページ幅（ポイント）
        height: ページ高さ（ポイント）
        error_message: エラーメッセージ
    """
    path: str
    status: str  # converted, error
    page: Optional[int] = None
    width: Optional[float] = None
    height: Optional[float] = None
    error_message: Optional[str] = None


@dataclass
class ConversionSummary:
    """
    変換サマリー

    Attributes:
        run_time: 実行時刻
        input_dir: 入力フォルダ
        output_path: 出力PDF
        total_files: 対象画像数
        converted: ページ化できた数
        errors: 読み込み失敗数
        saved: PDFを書き出したか
        files: ファイル別処理結果リスト
    """
    run_time: str = field(default_factory=lambda: datetime.datetime.now().isoformat())
    input_dir: str = ""
    output_path: str = ""
    total_files: int = 0
    converted: int = 0
    errors: int = 0
    saved: bool = False
    files: List[Dict[str, Any]] = field(default_factory=list)

    def add_result(self, result: FileResult):
        """処理結果を追加"""
        self.files.append(asdict(result))
        self.total_files += 1

        if result.status == "converted":
            self.converted += 1
        elif result.status == "error":
            self.errors += 1

    @property
    def failed_files(self) -> List[str]:
        """読み込みに失敗したファイルのパス"""
        return [f['path'] for f in self.files if f['status'] == "error"]

    def save(self, report_path: Path) -> Path:
        """
        サマリーをJSONファイルに保存

        Args:
            report_path: 保存先

        Returns:
            保存したファイルのパス
        """
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, ensure_ascii=False, indent=2)
        return report_path
