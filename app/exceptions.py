"""
Application Exceptions

Errors raised by the service layer and translated to HTTP responses by
the exception handlers registered in app.main.

"Not found" is not an exception here: lookups return None and the routers
turn that into a 404.
"""


class DuplicateError(ValueError):
    """
    A record with the same identifying fields already exists.

    Raised on registration when an author with a matching name, or a book
    with the same title and author, is already stored. Mapped to
    409 Conflict.
    """
