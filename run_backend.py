#!/usr/bin/env python3
"""Start the Building Builder API server."""

import uvicorn

from buildlab.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "buildlab.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["buildlab"],
        log_level=settings.log_level.lower(),
    )
