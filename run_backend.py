#!/usr/bin/env python3
"""Start the Cover Generator API server."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "covergen.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["covergen"],
    )
