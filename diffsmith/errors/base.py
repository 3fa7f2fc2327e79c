class DiffsmithError(Exception):
    """Base class for every error raised by diffsmith."""
