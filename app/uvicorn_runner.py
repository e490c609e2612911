from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import uvicorn

from app.deps import get_app_state


def main(host: Optional[str] = None, port: Optional[int] = None):
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    api_cfg = get_app_state().api_cfg
    uvicorn.run(
        "app.main:app",
        host=host or api_cfg.get("host", "127.0.0.1"),
        port=int(port or api_cfg.get("port", 8000)),
        reload=False,
    )


if __name__ == "__main__":
    main()
