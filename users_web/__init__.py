"""
Presentation client for the Users API.

``client`` talks to the API, ``view`` turns the response into an HTML
list, and ``app`` serves the page on its own port.
"""
