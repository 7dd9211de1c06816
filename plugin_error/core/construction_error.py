"""Exception raised when a PluginError cannot be constructed."""


class ConstructionError(Exception):
    """
    Raised when a PluginError is missing a required field.

    Attributes:
        message: Human-readable description of the missing field.
    """

    def __init__(self, message: str) -> None:
        """
        Create a new ConstructionError.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ConstructionError(message={self.message!r})"
