"""Run the API server.

Usage:
    python -m razzies
    razzies
"""

from __future__ import annotations

import uvicorn

from razzies.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "razzies.api.app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
