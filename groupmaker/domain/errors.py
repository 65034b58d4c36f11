# groupmaker/domain/errors.py


class GroupingError(Exception):
    """Base exception for grouping errors."""
    pass


class PreconditionError(GroupingError, ValueError):
    """Inputs violate the partition preconditions (duplicates, too few names, bad size)."""
    pass


class InfeasibleConstraintsError(GroupingError):
    """A must-together component is larger than the group size."""

    def __init__(self, message: str, largest_component: int = 0, group_size: int = 0):
        super().__init__(message)
        self.largest_component = largest_component
        self.group_size = group_size
