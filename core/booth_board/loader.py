from __future__ import annotations

import logging
from typing import Optional

import requests


logger = logging.getLogger(__name__)


class BoothDataError(Exception):
    """攤位資料讀取失敗的共通例外"""

    pass


class FetchError(BoothDataError):
    """HTTP 狀態碼不是 2xx"""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code
        self.url = url


class NetworkError(BoothDataError):
    """連線本身失敗（DNS、拒絕連線、逾時等）"""

    def __init__(self, url: str, reason: str = "") -> None:
        message = f"failed to reach {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url


def fetch_text(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> str:
    """URL 的內容以 UTF-8 文字回傳。不重試。

    Raises:
        FetchError: 狀態碼不是 2xx
        NetworkError: requests 層級的失敗
    """
    http = session or requests
    logger.debug("fetching %s (timeout=%s)", url, timeout)

    try:
        resp = http.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise NetworkError(url, str(exc)) from exc

    if not 200 <= resp.status_code < 300:
        raise FetchError(resp.status_code, url)

    # utf-8-sig: Excel 匯出的 CSV 開頭常帶 BOM
    return resp.content.decode("utf-8-sig")
