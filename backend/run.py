#!/usr/bin/env python3
"""
Start the RowGram server.
"""

import logging

import uvicorn
from rowgram.config import get_settings

settings = get_settings()

if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 50)
    print("RowGram")
    print("=" * 50)
    print(f"Starting server at http://{settings.host}:{settings.port}")
    print(f"API Docs: http://localhost:{settings.port}/docs")
    print("=" * 50)

    uvicorn.run(
        "rowgram.main:app",
        host=settings.host,
        port=settings.port,
        reload=True
    )
