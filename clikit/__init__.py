"""Building blocks for command-line programs: errors, collections, files and help text."""

__version__ = "0.1.0"

__all__ = [
    "assertions",
    "awserrors",
    "collectionutils",
    "entrypoint",
    "errors",
    "files",
    "helptext",
]