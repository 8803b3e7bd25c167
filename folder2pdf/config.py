# folder2pdf/config.py
"""設定管理モジュール"""

from dataclasses import dataclass, field
from typing import Set


# PDFのDocument Info (Author) に書き込むツール識別子
AUTHOR_TAG = "Image2Pdf"


@dataclass
class Config:
    """
    アプリケーション設定

    Attributes:
        default_dpi: 解像度情報を持たない画像に仮定するDPI
        default_base_name: 出力先未指定時のファイル名（拡張子なし）
        author: PDFのAuthorメタデータ
        verbose: 詳細ログ出力
        quiet: コンソール出力抑制
        dry_run: 実行計画のみ表示
        pause: 終了前にキー入力を待つ
        show_progress: プログレスバー表示
    """
    # 変換設定
    default_dpi: float = 72.0
    default_base_name: str = "output"
    author: str = AUTHOR_TAG

    # CLI オプション
    verbose: bool = False
    quiet: bool = False
    dry_run: bool = False
    pause: bool = True
    show_progress: bool = True

    # 拡張子設定
    image_extensions: Set[str] = field(default_factory=lambda: {'.jpg', '.jpeg', '.png', '.bmp', '.gif', '.tiff'})
    # PDFライブラリが直接読めないため、PNGに再エンコードしてから渡す形式
    webp_extensions: Set[str] = field(default_factory=lambda: {'.webp'})

    @property
    def supported_extensions(self) -> Set[str]:
        """変換対象の全拡張子"""
        return self.image_extensions | self.webp_extensions

    @classmethod
    def from_args(cls, args) -> 'Config':
        """
        argparse引数から設定を作成

        コマンドラインでフォルダを指定した場合は非対話モードとみなし、
        終了前のキー入力待ちを行わない。

        Args:
            args: argparseの結果オブジェクト

        Returns:
            Config インスタンス
        """
        interactive = getattr(args, 'target_dir', None) is None
        quiet = getattr(args, 'quiet', False)
        config = cls(
            verbose=getattr(args, 'verbose', False),
            quiet=quiet,
            dry_run=getattr(args, 'dry_run', False),
            pause=interactive and not getattr(args, 'no_pause', False),
            show_progress=not (quiet or getattr(args, 'no_progress', False)),
        )

        default_dpi = getattr(args, 'default_dpi', None)
        if default_dpi is not None:
            if default_dpi <= 0:
                raise ValueError(f"--default-dpi must be positive, got {default_dpi}")
            config.default_dpi = float(default_dpi)

        return config
