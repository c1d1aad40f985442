"""
asgi.py -- Application assembly for the to-do relay.

This is the ONLY file that mounts the web router on the API app. api/main.py
knows nothing about web/routes.py, so the JSON surface can be served and
tested on its own.

Run with:  uvicorn asgi:app --reload
           python main.py
"""

from api.main import app
from web.routes import router as web_router

app.include_router(web_router, tags=["Web UI"])
