"""Raised when a project name is already taken by another repository."""


class NameConflictError(ValueError):
    """Project name collision on watch.

    Attributes:
        name: The requested project name
        conflicting_path: Repository that already uses ``name``
    """

    def __init__(self, name: str, conflicting_path: str):
        self.name = name
        self.conflicting_path = conflicting_path
        super().__init__(f"name conflict: {name!r} is already used by {conflicting_path}")
