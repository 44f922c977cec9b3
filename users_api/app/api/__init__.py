"""
API package containing the HTTP routes.

``router.py`` exposes a single ``router`` which includes all
domain‑specific endpoints.  The health check is mounted at the root
and the data endpoints under ``/api``.
"""
