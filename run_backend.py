#!/usr/bin/env python3
"""Start the Roof Metrics API server."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "roofmetrics.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["roofmetrics"],
        log_level="info",
    )
