"""
Sample backend API and client view.

* `app/server/` - FastAPI service exposing the health, hello and data routes.
* `app/client/` - Client view that fetches the hello message and renders it.
"""

__version__ = "0.1.0"
