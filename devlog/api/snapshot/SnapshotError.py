"""Raised when a snapshot git step fails."""


class SnapshotError(RuntimeError):
    """A git invocation during snapshot capture exited non-zero.

    Attributes:
        repo_path: Repository being captured
        step: Git step that failed ("add" or "diff")
    """

    def __init__(self, repo_path: str, step: str, detail: str):
        self.repo_path = repo_path
        self.step = step
        super().__init__(f"git {step} failed in {repo_path}: {detail}" if detail else f"git {step} failed in {repo_path}")
