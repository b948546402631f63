"""Raised when a path is not inside a git working tree."""


class NotARepositoryError(ValueError):
    """Path could not be resolved to a repository root."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"not a git repository: {path}")
