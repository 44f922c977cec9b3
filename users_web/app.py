"""
Presentation client server.

Serves a single HTML page listing the users.  Each page load builds a
fresh :class:`~users_web.view.UserListView`, which makes exactly one
request to the Users API; nothing is cached between loads.  Run it
on its own port next to the API, e.g.::

    uvicorn users_web.app:app --port 3000
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from users_api.app.core.config import Settings
from users_api.app.core.logging_config import setup_logging

from .client import UsersAPI
from .view import UserListView


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Users</title>
</head>
<body>
  <h1>Users</h1>
  {user_list}
</body>
</html>
"""


def render_page(view: UserListView) -> str:
    return PAGE_TEMPLATE.format(user_list=view.render())


def create_web_app(client: Optional[UsersAPI] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create the presentation client application.

    Parameters
    ----------
    client : Optional[UsersAPI]
        API client to fetch users with.  Defaults to one pointing at
        ``settings.api_base_url``.
    settings : Optional[Settings]
        Settings read from the environment when omitted.  Only the
        logging and API address fields are used; the database fields
        are not required here.
    """
    settings = settings or Settings()
    setup_logging(settings)
    client = client or UsersAPI(base_url=settings.api_base_url)

    app = FastAPI(title="Users Web", docs_url=None, redoc_url=None, openapi_url=None)

    # ``def`` so the blocking request runs in the thread pool.
    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        view = UserListView(client)
        view.load()
        return render_page(view)

    return app


app = create_web_app()
