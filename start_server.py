#!/usr/bin/env python3
"""Start the route optimizer API with uvicorn, honouring the PORT environment variable."""

import os
import subprocess
import sys
from pathlib import Path


def _port() -> int:
    port = os.environ.get("PORT", "8000")
    try:
        return int(port)
    except ValueError:
        print(f"Warning: Invalid PORT value '{port}', using default 8000", file=sys.stderr)
        return 8000


def main() -> int:
    src_path = Path(__file__).resolve().parent / "src"
    pythonpath = os.environ.get("PYTHONPATH", "")
    os.environ["PYTHONPATH"] = f"{src_path}{os.pathsep}{pythonpath}" if pythonpath else str(src_path)

    if not os.environ.get("ROUTE_OPTIMIZER_GOOGLE_MAPS_API_KEY"):
        print(
            "Warning: ROUTE_OPTIMIZER_GOOGLE_MAPS_API_KEY is not set; /api/compute-route will answer 500",
            file=sys.stderr,
        )

    port = _port()
    cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "app.main:app",
        "--host",
        "0.0.0.0",
        "--port",
        str(port),
        "--proxy-headers",
        "--forwarded-allow-ips",
        "*",
    ]
    print(f"Starting server on port {port}...", file=sys.stderr)
    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        print("Server interrupted by user", file=sys.stderr)
        return 0


if __name__ == "__main__":
    sys.exit(main())
