# folder2pdf/utils.py
"""ユーティリティモジュール"""

from pathlib import Path
from typing import Optional, Union

from .exceptions import SaveError

PDF_EXTENSION = ".pdf"


def get_unique_path(directory: Union[str, Path], base_name: str, extension: str) -> Path:
    """
    既存ファイルと衝突しないパスを返す

    output.pdf -> output (1).pdf -> output (2).pdf ... の順に空きを探す。
    存在確認だけなので、同時に別プロセスが作成した場合は保証しない。

    Args:
        directory: 保存先フォルダ
        base_name: 拡張子なしのファイル名
        extension: 拡張子（'.pdf' または 'pdf'）

    Returns:
        存在しないファイルのパス
    """
    directory = Path(directory)
    if extension and not extension.startswith('.'):
        extension = '.' + extension

    candidate = directory / f"{base_name}{extension}"
    if not candidate.exists():
        return candidate

    counter = 1
    while True:
        candidate = directory / f"{base_name} ({counter}){extension}"
        if not candidate.exists():
            return candidate
        counter += 1


def ensure_pdf_extension(path: Path) -> Path:
    """
    拡張子を .pdf にそろえる

    すでに .pdf（大文字小文字問わず）ならそのまま返す。

    Args:
        path: 出力パス

    Returns:
        拡張子が .pdf のパス

    Raises:
        SaveError: ファイル名部分がない（"/" など）
    """
    if not path.name:
        raise SaveError(path, message=f"Not a valid output file path: {path}")
    if path.suffix.lower() == PDF_EXTENSION:
        return path
    if not path.suffix:
        # "scan." のような末尾ドットは拡張子なしとして扱う
        return path.with_name(path.name.rstrip('.') + PDF_EXTENSION)
    return path.with_suffix(PDF_EXTENSION)


def clean_user_path(value: Optional[str]) -> str:
    """
    入力されたパス文字列から前後の空白と引用符を除去する

    ドラッグ&ドロップで貼り付けたパスは引用符で囲まれていることがある。
    """
    if value is None:
        return ""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        value = value[1:-1].strip()
    return value


def resolve_output_path(input_dir: Path, user_value: Optional[str], base_name: str = "output") -> Path:
    """
    出力PDFのパスを決定する

    Args:
        input_dir: 入力フォルダ（相対パスの基準、既定の保存先）
        user_value: ユーザー入力（空なら既定名で重複しないパスを探す）
        base_name: 既定のファイル名（拡張子なし）

    Returns:
        拡張子が .pdf の出力パス

    Raises:
        SaveError: 出力ファイル名として使えないパス
    """
    value = clean_user_path(user_value)
    if not value:
        return get_unique_path(input_dir, base_name, PDF_EXTENSION)

    output_path = Path(value).expanduser()
    if not output_path.is_absolute():
        output_path = input_dir / output_path
    return ensure_pdf_extension(output_path)
