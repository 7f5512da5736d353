#!/usr/bin/env python3
"""Run script for cardbridge."""

import uvicorn

from cardbridge.config import get_host, get_port, is_debug

if __name__ == "__main__":
    uvicorn.run(
        "cardbridge.api.app:app",
        host=get_host(),
        port=get_port(),
        reload=is_debug()
    )
