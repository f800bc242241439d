class FamilyTreeError(Exception):
    """Base exception for family tree failures."""


class MemberNotFoundError(FamilyTreeError, LookupError):
    """Raised when an operation requires a member that is not in the tree."""

    def __init__(self, name: str):
        super().__init__(f"No member named {name!r} in the tree")
        self.name = name


class RootRemovalError(FamilyTreeError):
    """Raised when removing a member that has no parent to detach it from."""


class NoGrandchildrenError(FamilyTreeError):
    """Raised when no member below the receiver has any grandchildren."""


class TreeLoadError(FamilyTreeError):
    """Raised when a tree description cannot be read or is malformed."""
