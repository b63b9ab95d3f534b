"""Sunshine registration entrypoint.

Run with:
  python -m sunshine
"""

import logging
import os
import uvicorn

def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "3000"))
    reload = os.getenv("RELOAD", "false").lower() in {"1", "true", "yes", "y"}
    uvicorn.run("sunshine.app:create_app", factory=True, host=host, port=port, reload=reload)

if __name__ == "__main__":
    main()
