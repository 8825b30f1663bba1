"""Version information for message-events."""

MAJOR = 0
MINOR = 3
PATCH = 3

__version__ = f"{MAJOR}.{MINOR}.{PATCH}"
__app_name__ = "MessageEvents"


def get_version() -> str:
    """Return the semantic version string (MAJOR.MINOR.PATCH)."""
    return __version__
