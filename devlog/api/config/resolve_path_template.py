"""Substitute placeholders in a log path template."""

from pathlib import Path


def resolve_path_template(template: str, raw_dir: Path | str, date: str, project: str) -> Path:
    """Replace ``<raw_dir>``, ``<date>`` and ``<project>`` in ``template``.

    Substitution is literal; placeholders that do not appear are ignored.

    Example:
        >>> resolve_path_template("<raw_dir>/<date>/git-<project>.log", "/r", "2024-01-02", "api")
        PosixPath('/r/2024-01-02/git-api.log')
    """
    resolved = template.replace("<raw_dir>", str(raw_dir)).replace("<date>", date).replace("<project>", project)
    return Path(resolved).expanduser()
