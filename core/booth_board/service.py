from __future__ import annotations

import logging
from typing import Optional

import requests

from .loader import fetch_text
from .models import BoothGrid, DisplayResult, NoBoothsMessage, RenderState
from .parser import parse_csv
from .renderer import apply_error, apply_records


logger = logging.getLogger(__name__)


def display_booths(
    url: str,
    grid: Optional[BoothGrid] = None,
    message: Optional[NoBoothsMessage] = None,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    quoted: bool = False,
) -> DisplayResult:
    """主流程：讀取 CSV -> 解析 -> 寫入兩個輸出區域

    Loading -> rendered / empty / errored 三者之一，每次呼叫只進入一次。
    讀取或解析時的例外都在這裡吃掉並記錄，畫面只顯示共通的錯誤訊息。
    """
    grid = grid if grid is not None else BoothGrid()
    message = message if message is not None else NoBoothsMessage()

    # 先顯示「載入中」
    message.show()
    count = 0

    try:
        csv_text = fetch_text(url, session=session, timeout=timeout)
        booths = parse_csv(csv_text, quoted=quoted)
        state = apply_records(booths, grid, message)
        count = len(booths)
    except Exception:  # noqa: BLE001
        logger.exception("Error fetching or parsing CSV file: %s", url)
        state = apply_error(grid, message)

    if state == RenderState.rendered:
        logger.info("rendered %d booth(s) from %s", count, url)

    return DisplayResult(state=state, count=count, grid=grid, message=message)
