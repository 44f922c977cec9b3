"""
Application package for the Users API.

The service is deliberately small: a liveness check and one read‑only
listing of the ``users`` table.  It is still organised the same way as
larger services (``core`` for configuration, database and logging,
``api`` for routers, ``schemas`` for pydantic models and ``services``
for data access) so that new domains can be added alongside ``users``
without reshaping the package.

``create_app`` lives in ``main``; it is not imported here so that
importing a submodule (for example the schemas) does not build an
application and validate the environment as a side effect.
"""
