#!/usr/bin/env python3
"""Development server runner for HOLICAL."""

import uvicorn

from holical.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "holical.api:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level
    )
