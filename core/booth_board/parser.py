from __future__ import annotations

import csv
import io
from typing import List

from .models import Record


def _split_lines(text: str) -> List[str]:
    text = text.lstrip("\ufeff").strip()
    return [line.strip() for line in text.split("\n")]


def _split_values(line: str) -> List[str]:
    return [value.strip() for value in line.split(",")]


def _quoted_rows(lines: List[str]) -> List[List[str]]:
    """csv.reader 讀取，允許 "a,b" 這類包含逗號的欄位"""
    reader = csv.reader(
        io.StringIO("\n".join(lines)),
        delimiter=",",
        quotechar='"',
        doublequote=True,
        skipinitialspace=True,
    )
    return [[value.strip() for value in row] or [""] for row in reader]


def _to_record(headers: List[str], values: List[str]) -> Record:
    record: Record = {}
    for index, header in enumerate(headers):
        # 同名欄位後者覆蓋前者；缺少的值為 None
        record[header] = values[index] if index < len(values) else None
    return record


def parse_csv(text: str, *, quoted: bool = False) -> List[Record]:
    """CSV 純文字解析為攤位 Record 的列表

    - 第一行為欄位名稱，之後每行一筆
    - 少於 2 行（沒有資料行）回傳空列表
    - 預設僅以逗號分割，不支援引號；quoted=True 時改用 csv.reader
    """
    lines = _split_lines(text)
    if len(lines) < 2:
        return []

    if quoted:
        rows = _quoted_rows(lines)
        if len(rows) < 2:
            return []
    else:
        rows = [_split_values(line) for line in lines]

    headers = rows[0]
    return [_to_record(headers, values) for values in rows[1:]]
