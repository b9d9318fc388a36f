"""
Error kinds shared by the data layer and the routers.

"Not found" is not an error: data-layer lookups return None (or False for
deletes) and the routers turn that into a 404.
"""


class StorageError(RuntimeError):
    """The database could not complete an operation (unreachable, constraint violation, ...)."""
    pass
