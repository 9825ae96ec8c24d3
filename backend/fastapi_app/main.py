from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import requests
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

# ============================================================
# 專案根目錄加入 sys.path
# （Lambda / uvicorn 都能解析 core 套件）
# ============================================================
ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from core.booth_board.config import Settings, configure_logging  # noqa: E402
from core.booth_board.loader import FetchError, NetworkError, fetch_text  # noqa: E402
from core.booth_board.models import BoothsResponse  # noqa: E402
from core.booth_board.page import render_page  # noqa: E402
from core.booth_board.parser import parse_csv  # noqa: E402
from core.booth_board.service import display_booths  # noqa: E402

API_VERSION = "0.1.0"

# 前綴被上游（API Gateway stage、反向代理）移除時，由上游放入此 header
PREFIX_HEADER = "x-forwarded-prefix"

settings = Settings.from_env()
configure_logging(settings.log_level)

app = FastAPI(
    title="Booth Board",
    version=API_VERSION,
    description="從 booths.csv 產生攤位卡片一覽",
    root_path=settings.root_path,
)


async def get_settings() -> Settings:
    return settings


def get_session() -> Iterator[requests.Session]:
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()


def _csv_url(request: Request, cfg: Settings) -> str:
    return cfg.resolve_csv_url(
        str(request.base_url),
        prefix=request.headers.get(PREFIX_HEADER, ""),
    )


def _public_file(cfg: Settings, name: str) -> Path:
    public_dir = Path(cfg.public_dir)
    if not public_dir.is_absolute():
        public_dir = ROOT_DIR / public_dir
    path = public_dir / name
    if not path.is_file():
        raise HTTPException(status_code=404, detail=f"{name} not found")
    return path


@app.exception_handler(FetchError)
async def fetch_error_handler(_: Request, exc: FetchError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content={
            "error": {
                "code": "FETCH_ERROR",
                "message": str(exc),
                "status": exc.status_code,
            },
            "meta": {
                "version": API_VERSION,
            },
        },
    )


@app.exception_handler(NetworkError)
async def network_error_handler(_: Request, exc: NetworkError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content={
            "error": {
                "code": "NETWORK_ERROR",
                "message": str(exc),
            },
            "meta": {
                "version": API_VERSION,
            },
        },
    )


@app.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    cfg: Settings = Depends(get_settings),
    session: requests.Session = Depends(get_session),
) -> HTMLResponse:
    # 資料錯誤也回 200，畫面上只顯示提示訊息
    result = display_booths(
        _csv_url(request, cfg),
        session=session,
        timeout=cfg.fetch_timeout,
        quoted=cfg.csv_quoted,
    )
    return HTMLResponse(render_page(result.grid, result.message))


# index 在 threadpool 內讀取 /booths.csv；以下路由與其依賴不可進入 threadpool
@app.get("/booths.csv")
async def booths_csv(cfg: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(_public_file(cfg, "booths.csv"), media_type="text/csv; charset=utf-8")


@app.get("/placeholder.svg")
async def placeholder_svg(cfg: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(_public_file(cfg, "placeholder.svg"), media_type="image/svg+xml")


@app.get("/api/booths")
def list_booths(
    request: Request,
    cfg: Settings = Depends(get_settings),
    session: requests.Session = Depends(get_session),
):
    csv_text = fetch_text(
        _csv_url(request, cfg),
        session=session,
        timeout=cfg.fetch_timeout,
    )
    booths = parse_csv(csv_text, quoted=cfg.csv_quoted)
    return BoothsResponse(count=len(booths), data=booths).model_dump()


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
