"""Errors raised when a sow is not legal for the player to move."""


class MancalaError(Exception):
    """Base class for illegal sow requests."""

    def __init__(self, pocket: int, message: str):
        super().__init__(message)
        self.pocket = pocket


class PocketIndexError(MancalaError, IndexError):
    """Pocket is not one of the mover's own playing pockets."""

    def __init__(self, pocket: int):
        super().__init__(pocket, f"Pocket {pocket} is not playable by the side to move")


class EmptyPocketError(MancalaError, ValueError):
    """Pocket holds no stones."""

    def __init__(self, pocket: int):
        super().__init__(pocket, f"Pocket {pocket} is empty")
