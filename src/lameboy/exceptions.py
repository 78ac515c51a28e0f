"""
Lameboy exceptions
"""


class LameboyError(Exception):
    """
    Base class for every error raised by the game.
    """


class AssetLoadError(LameboyError):
    """
    An image or sound could not be loaded.

    :param path: Path of the asset that failed
    :type path: str

    :param reason: Underlying error message
    :type reason: str
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path
        self.reason = reason
