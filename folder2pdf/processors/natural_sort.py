# folder2pdf/processors/natural_sort.py
"""自然順ソートモジュール

ファイルエクスプローラーと同じように、ファイル名に含まれる数字を
文字ではなく数値として比較する（img2.png < img10.png）。

比較ルール:
    1. 文字列を先頭から、ASCII数字(0-9)の連続部分はひとかたまりとして、
       それ以外は1文字ずつ比較する
    2. 数字同士は先頭のゼロを除いた桁数で比較し、桁数が同じなら文字列として比較する
       （整数に変換しないので、どれだけ長い数字でも桁あふれしない）
    3. 数字以外の文字は大文字小文字を区別せずに（casefold）文字コード順で比較する
    4. 数字と文字の比較では、数字のかたまりを文字 '0' として扱う
       （'.' や ' ' は数字より前、英字は数字より後になる）
    5. 片方がもう片方の先頭部分と一致する場合は短い方が先
    6. 以上で差がつかない場合（大文字小文字や先頭ゼロだけが違う場合）は
       元の文字列をそのまま比較する。これにより比較結果が0になるのは
       同一文字列のときだけになる
"""

import re
from typing import Tuple

_RUN_PATTERN = re.compile(r'([0-9]+)')


def _split_runs(value: str) -> Tuple[tuple, ...]:
    runs = []
    # split() の結果は 文字, 数字, 文字, 数字, ... の順に並ぶ
    for index, part in enumerate(_RUN_PATTERN.split(value)):
        if index % 2:
            significant = part.lstrip('0') or '0'
            runs.append(('0', len(significant), significant))
        else:
            runs.extend((char.casefold(),) for char in part)
    return tuple(runs)


def natural_sort_key(value: str) -> tuple:
    """
    自然順ソート用のキーを返す

    Args:
        value: ファイル名などの文字列

    Returns:
        sorted() の key に渡せるタプル
    """
    return (_split_runs(value), value)


def natural_compare(a: str, b: str) -> int:
    """
    2つの文字列を自然順で比較する

    Args:
        a: 比較する文字列
        b: 比較する文字列

    Returns:
        a が先なら -1、同一なら 0、b が先なら 1
    """
    key_a = natural_sort_key(a)
    key_b = natural_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0
