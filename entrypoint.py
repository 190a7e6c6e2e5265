"""Backend entrypoint. Starts uvicorn with host/port from env."""
import os
import uvicorn

# Import app directly so frozen bundles can resolve the package
# (uvicorn's string-based import fails under PyInstaller).
from stockboard.main import app


def main() -> None:
    port = int(os.environ.get("PORT", "3000"))
    host = os.environ.get("HOST", "127.0.0.1")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
