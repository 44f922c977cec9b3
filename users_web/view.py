"""
User list view.

``UserListView`` holds the state of the page: the list of users it
has received and whether it has already asked for them.  It renders
that state as an HTML ``<ul>`` where every ``<li>`` carries the user's
identifier as ``data-key``, so a given payload always produces the
same markup and distinct identifiers never share a key.

The view requests data at most once in its lifetime.  While the
request has not completed the list is empty.  If the request fails
nothing is shown in its place; the error is only logged.
"""

import html
import logging
from typing import Any, Dict, List, Optional

from .client import UsersAPI


logger = logging.getLogger(__name__)


class UserListView:
    """Render state for the user list."""

    def __init__(self, client: UsersAPI) -> None:
        self.client = client
        self.users: List[Dict[str, Any]] = []
        self.requested = False
        self.loaded = False
        self.error: Optional[Dict[str, Any]] = None

    @property
    def pending(self) -> bool:
        """True until the request has completed, successfully or not."""
        return not self.loaded

    def load(self) -> None:
        """Fetch the users once; later calls do nothing."""
        if self.requested:
            return
        self.requested = True
        users, error = self.client.list_users()
        self.loaded = True
        if error:
            self.error = error
            logger.warning("Could not load users: %s", error.get("message"))
            return
        self.users = users

    def render_items(self) -> List[str]:
        items = []
        for user in self.users:
            key = html.escape(str(user["id"]), quote=True)
            name = html.escape(str(user["name"])) if user.get("name") is not None else ""
            items.append(f'<li data-key="{key}">{name}</li>')
        return items

    def render(self) -> str:
        """Return the ``<ul>`` for the current state."""
        items = self.render_items()
        if not items:
            return '<ul id="users"></ul>'
        return '<ul id="users">\n  ' + "\n  ".join(items) + "\n</ul>"
