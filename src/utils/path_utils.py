from pathlib import Path


def find_repo_root(
    start: Path | None = None,
    markers: tuple[str, ...] = ("pyproject.toml", "dashboard.yaml"),
) -> Path:
    """Walk upwards from ``start`` until a folder containing any of ``markers`` is found.

    Args:
        start: Optional starting path. Defaults to the location of this file.
        markers: Filenames used to identify the repository root.

    Returns:
        The repository root as a :class:`Path`, or the current working
        directory when no marker is found (e.g. an installed copy).
    """
    p = (start or Path(__file__).resolve()).parent
    for candidate in [p, *p.parents]:
        if any((candidate / marker).exists() for marker in markers):
            return candidate
    return Path.cwd()


def ensure_dir(path: str | Path) -> Path:
    """Ensure the directory exists and return the Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p
