#!/usr/bin/env python3
"""Run script for payinstruct."""

import uvicorn

from payinstruct.settings import API_HOST, API_PORT, DEBUG

if __name__ == "__main__":
    uvicorn.run(
        "payinstruct.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=DEBUG
    )
