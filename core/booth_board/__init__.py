# core/booth_board/__init__.py

"""
Booth Board core package.

- models.py  : Pydantic 模型（輸出區域 BoothGrid / NoBoothsMessage 等）
- config.py  : 環境變數 -> Settings
- loader.py  : 透過 requests 讀取 CSV
- parser.py  : CSV 純文字 -> Record 列表
- colors.py  : 區域 / 商品類型 -> Tailwind CSS class
- renderer.py: 攤位卡片 HTML 組裝
- page.py    : 整頁 HTML
- service.py : 讀取 -> 解析 -> 顯示 的主流程
"""
