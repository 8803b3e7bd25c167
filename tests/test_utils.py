# tests/test_utils.py
"""utilsモジュールのユニットテスト"""

import pytest
from folder2pdf.exceptions import SaveError
from folder2pdf.utils import clean_user_path, ensure_pdf_extension, get_unique_path, resolve_output_path
from pathlib import Path


class TestGetUniquePath:
    """get_unique_path関数のテスト"""

    def test_empty_directory(self, tmp_path):
        """空のフォルダでは output.pdf を返すこと"""
        assert get_unique_path(tmp_path, "output", ".pdf") == tmp_path / "output.pdf"

    def test_first_suffix(self, tmp_path):
        """output.pdf があれば output (1).pdf を返すこと"""
        (tmp_path / "output.pdf").touch()
        assert get_unique_path(tmp_path, "output", ".pdf") == tmp_path / "output (1).pdf"

    def test_counter_increments(self, tmp_path):
        """使用済みの番号を飛ばして最初の空きを返すこと"""
        (tmp_path / "output.pdf").touch()
        (tmp_path / "output (1).pdf").touch()
        (tmp_path / "output (2).pdf").touch()
        assert get_unique_path(tmp_path, "output", ".pdf") == tmp_path / "output (3).pdf"

    def test_returns_first_gap(self, tmp_path):
        """番号に抜けがあれば最初の抜けを返すこと"""
        (tmp_path / "output.pdf").touch()
        (tmp_path / "output (2).pdf").touch()
        assert get_unique_path(tmp_path, "output", ".pdf") == tmp_path / "output (1).pdf"

    def test_extension_without_dot(self, tmp_path):
        """ドットなしの拡張子も受け付けること"""
        assert get_unique_path(tmp_path, "output", "pdf") == tmp_path / "output.pdf"

    def test_does_not_create_files(self, tmp_path):
        """パスを返すだけでファイルは作らないこと"""
        get_unique_path(tmp_path, "output", ".pdf")
        assert list(tmp_path.iterdir()) == []

    def test_other_names_do_not_collide(self, tmp_path):
        """別名のファイルは影響しないこと"""
        (tmp_path / "output.txt").touch()
        (tmp_path / "report.pdf").touch()
        assert get_unique_path(tmp_path, "output", ".pdf") == tmp_path / "output.pdf"


class TestEnsurePdfExtension:
    """ensure_pdf_extension関数のテスト"""

    @pytest.mark.parametrize("given, expected", [
        ("book", "book.pdf"),
        ("book.txt", "book.pdf"),
        ("book.pdf", "book.pdf"),
        ("book.PDF", "book.PDF"),
        ("my.scans.jpg", "my.scans.pdf"),
    ])
    def test_normalizes_extension(self, given, expected):
        """拡張子を .pdf にそろえること（大文字の .PDF はそのまま）"""
        assert ensure_pdf_extension(Path("out") / given) == Path("out") / expected

    def test_path_without_file_name(self):
        """ファイル名部分がないパスは SaveError になること"""
        with pytest.raises(SaveError):
            ensure_pdf_extension(Path("/"))


class TestCleanUserPath:
    """clean_user_path関数のテスト"""

    @pytest.mark.parametrize("given, expected", [
        ("  /tmp/scans  ", "/tmp/scans"),
        ('"/tmp/my scans"', "/tmp/my scans"),
        ("'C:\\scans'", "C:\\scans"),
        ("", ""),
        (None, ""),
    ])
    def test_strips_whitespace_and_quotes(self, given, expected):
        """前後の空白と引用符を除去すること"""
        assert clean_user_path(given) == expected


class TestResolveOutputPath:
    """resolve_output_path関数のテスト"""

    def test_blank_uses_default_name(self, tmp_path):
        """未入力なら入力フォルダの output.pdf になること"""
        assert resolve_output_path(tmp_path, "") == tmp_path / "output.pdf"
        assert resolve_output_path(tmp_path, "   ") == tmp_path / "output.pdf"
        assert resolve_output_path(tmp_path, None) == tmp_path / "output.pdf"

    def test_blank_avoids_existing_file(self, tmp_path):
        """未入力で output.pdf が既にあれば番号付きになること"""
        (tmp_path / "output.pdf").touch()
        assert resolve_output_path(tmp_path, "") == tmp_path / "output (1).pdf"

    def test_relative_path_is_joined_to_input(self, tmp_path):
        """相対パスは入力フォルダ基準になること"""
        assert resolve_output_path(tmp_path, "book") == tmp_path / "book.pdf"
        assert resolve_output_path(tmp_path, "sub/book.pdf") == tmp_path / "sub" / "book.pdf"

    def test_absolute_path_is_kept(self, tmp_path):
        """絶対パスはそのまま使うこと"""
        target = tmp_path / "elsewhere" / "book.docx"
        assert resolve_output_path(tmp_path / "images", str(target)) == tmp_path / "elsewhere" / "book.pdf"

    def test_user_path_may_overwrite(self, tmp_path):
        """ユーザー指定のパスは既存でも番号を付けないこと"""
        (tmp_path / "book.pdf").touch()
        assert resolve_output_path(tmp_path, "book.pdf") == tmp_path / "book.pdf"

    def test_root_path_rejected(self, tmp_path):
        """ルート "/" のような出力先は SaveError になること"""
        with pytest.raises(SaveError) as excinfo:
            resolve_output_path(tmp_path, "/")
        assert excinfo.value.path == Path("/")
