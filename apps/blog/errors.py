"""
Blog domain errors. Each carries the HTTP status the API renders it with.
"""


class BlogError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SessionRequired(BlogError):
    status_code = 401

    def __init__(self, message: str = "Not logged in"):
        super().__init__(message)


class InvalidSlug(BlogError):
    status_code = 400

    def __init__(self, message: str = "Slug can't contain spaces. Use hyphens or underscores instead."):
        super().__init__(message)


class PostNotFound(BlogError):
    status_code = 404

    def __init__(self, message: str = "Post not found"):
        super().__init__(message)


class PostWriteError(BlogError):
    """The storage layer rejected an insert, update or delete."""

    status_code = 400
