import sys
from pathlib import Path

import pytest
import requests

# tests/ 的上一層 = 專案根目錄
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# 專案根目錄加到 sys.path 最前面
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)


def make_response(status_code: int = 200, text: str = "") -> requests.Response:
    """測試用 requests.Response"""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class FakeSession:
    """只實作 get() 的 requests.Session 替身，記錄被呼叫的 URL"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        pass


@pytest.fixture
def csv_session():
    def _factory(text: str, status_code: int = 200) -> FakeSession:
        return FakeSession(response=make_response(status_code, text))

    return _factory
