"""
Start the API with uvicorn on HOST:PORT (defaults 0.0.0.0:3000).

Usage:
    python run.py
"""

import uvicorn

from app.config import get_settings


def main() -> None:
    s = get_settings()
    uvicorn.run("app.main:app", host=s.host, port=s.port)


if __name__ == "__main__":
    main()
