"""
Service layer abstraction.

Each service encapsulates data access for a domain so that API
handlers never build SQL themselves.
"""
