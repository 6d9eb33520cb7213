"""
Service layer.

Each service encapsulates data access for one domain and is built with
the application's ``Database``.  API handlers obtain services through
the dependencies in ``api.deps`` and never touch SQL themselves.
"""
