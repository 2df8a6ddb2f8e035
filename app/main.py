"""Application entry point.

Run with: uvicorn main:server_app --app-dir app
"""

import uvicorn

from server import server

server_app = server.handler


if __name__ == "__main__":
    uvicorn.run(server_app, host="127.0.0.1", port=8000)
