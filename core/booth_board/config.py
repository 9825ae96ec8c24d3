from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


DEFAULT_CSV_NAME = "booths.csv"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """
    環境變數設定（.env 亦可）。

    - BOOTHS_CSV_URL       : CSV 的絕對 URL，未設定時使用本服務的 /booths.csv
    - BOOTHS_PUBLIC_DIR    : /booths.csv 讀取的目錄
    - BOOTHS_FETCH_TIMEOUT : 讀取逾時（秒）
    - BOOTHS_CSV_QUOTED    : 是否支援雙引號包住的欄位
    - BOOTHS_LOG_LEVEL     : logging 等級
    - BOOTHS_ROOT_PATH     : API Gateway 後方的 root_path
    """

    csv_url: Optional[str] = None
    public_dir: str = "public"
    fetch_timeout: float = Field(default=10.0, gt=0)
    csv_quoted: bool = False
    log_level: str = "INFO"
    root_path: str = ""

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        if environ is None:
            load_dotenv()
            environ = os.environ

        mapping = {
            "csv_url": "BOOTHS_CSV_URL",
            "public_dir": "BOOTHS_PUBLIC_DIR",
            "fetch_timeout": "BOOTHS_FETCH_TIMEOUT",
            "csv_quoted": "BOOTHS_CSV_QUOTED",
            "log_level": "BOOTHS_LOG_LEVEL",
            "root_path": "BOOTHS_ROOT_PATH",
        }
        values = {
            field: environ[key]
            for field, key in mapping.items()
            if environ.get(key, "") != ""
        }
        return cls(**values)

    def resolve_csv_url(self, base_url: str, prefix: str = "") -> str:
        """BOOTHS_CSV_URL 優先，否則以頁面所在位置解析 booths.csv

        prefix 為反向代理 / API Gateway stage 移除掉的路徑前綴（例如 "/dev"）。
        """
        if self.csv_url:
            return self.csv_url
        parts = [base_url.rstrip("/")]
        if prefix.strip("/"):
            parts.append(prefix.strip("/"))
        parts.append(DEFAULT_CSV_NAME)
        return "/".join(parts)


def configure_logging(level: str = "INFO") -> None:
    """root logger 尚無 handler 時才設定，避免重複輸出"""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("core.booth_board").setLevel(level)
