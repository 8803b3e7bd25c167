# folder2pdf/cli.py
"""コマンドラインインターフェースモジュール"""

import argparse


def setup_args(argv=None):
    """
    コマンドライン引数をパースする

    引数なしで起動した場合は対話モード（フォルダと出力先を入力で尋ねる）。

    Args:
        argv: 引数リスト（省略時は sys.argv）

    Returns:
        パース済みの引数オブジェクト
    """
    parser = argparse.ArgumentParser(
        prog='folder2pdf',
        description='Convert a folder of images into a single PDF (one image per page)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # 対話モード
  %(prog)s /path/to/scans                    # scans/output.pdf に保存
  %(prog)s /path/to/scans -o book.pdf        # scans/book.pdf に保存
  %(prog)s /path/to/scans -o /tmp/book       # /tmp/book.pdf に保存
  %(prog)s /path/to/scans --dry-run          # 実行計画のみ表示
        """
    )
    # 基本引数
    parser.add_argument('target_dir', nargs='?', default=None,
                        help='Folder containing the images (prompted for when omitted)')

    # 出力オプション
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Output PDF filename or full path (default: output.pdf in the image folder)')
    parser.add_argument('--report', type=str, default=None,
                        help='Also write a JSON conversion report to this path')

    # 処理オプション
    parser.add_argument('--default-dpi', type=float, default=None,
                        help='DPI assumed for images without resolution metadata (default: 72)')
    parser.add_argument('--no-pause', action='store_true',
                        help='Do not wait for a keypress before exiting')

    # ログ・表示オプション
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging (DEBUG level)')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress console output and progress bar')
    parser.add_argument('--no-progress', action='store_true',
                        help='Disable the progress bar')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write a detailed log to this file')
    parser.add_argument('--dry-run', action='store_true',
                        help='Show what would be converted without creating the PDF')

    return parser.parse_args(argv)
