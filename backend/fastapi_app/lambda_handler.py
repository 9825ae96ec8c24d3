from __future__ import annotations

import json

from mangum import Mangum

from backend.fastapi_app.main import PREFIX_HEADER, app


def _dig(d, *keys, default=None):
    cur = d
    for k in keys:
        if not isinstance(cur, dict) or k not in cur:
            return default
        cur = cur[k]
    return cur


def _base_path(stage):
    # $default stage 不會出現在路徑中
    if not stage or stage == "$default":
        return None
    return f"/{stage}"


def _with_prefix_header(event, base_path):
    """
    Mangum 移除 stage 前綴後，FastAPI 的 request.base_url 不含 /dev 等路徑。
    頁面要以 <stage>/booths.csv 讀取資料，所以把前綴放進 header 交給 FastAPI。
    用戶端送來的同名 header 一律丟棄。
    """
    headers = {
        k: v for k, v in (event.get("headers") or {}).items() if k.lower() != PREFIX_HEADER
    }
    multi = {
        k: v
        for k, v in (event.get("multiValueHeaders") or {}).items()
        if k.lower() != PREFIX_HEADER
    }
    if base_path:
        headers[PREFIX_HEADER] = base_path
        if "multiValueHeaders" in event:
            multi[PREFIX_HEADER] = [base_path]

    patched = dict(event, headers=headers)
    if "multiValueHeaders" in event:
        patched["multiValueHeaders"] = multi
    return patched


def handler(event, context):
    stage = _dig(event, "requestContext", "stage")
    method = _dig(event, "requestContext", "http", "method") or event.get("httpMethod")
    path = event.get("rawPath") or _dig(event, "requestContext", "http", "path")
    base_path = _base_path(stage)

    print(
        json.dumps(
            {
                "diag": "booth_board_request",
                "stage": stage,
                "base_path": base_path,
                "method": method,
                "path": path,
            },
            ensure_ascii=False,
        )
    )

    # /dev、/prod 等 stage 前綴由 Mangum 移除後再交給 FastAPI
    asgi = Mangum(app, api_gateway_base_path=base_path)
    return asgi(_with_prefix_header(event, base_path), context)
