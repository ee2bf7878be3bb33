"""
Development server for the Fort Golf API.
Serves the FastAPI app with uvicorn; the frontend talks to it over HTTP.
"""

import logging
import os

import uvicorn

HOST = os.environ.get("FORTGOLF_HOST", "127.0.0.1")
PORT = int(os.environ.get("FORTGOLF_PORT", "8000"))
LOG_LEVEL = os.environ.get("FORTGOLF_LOG_LEVEL", "INFO").upper()

if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(f"Serving at http://{HOST}:{PORT}")
    print(f"API docs at http://{HOST}:{PORT}/docs")
    print("Press Ctrl+C to stop")
    uvicorn.run("fortgolf.api.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
