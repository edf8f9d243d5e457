from __future__ import annotations


class InvalidMemberError(AttributeError):
    """Raised when a Spring member is read or written under an unknown name."""

    def __init__(self, name: object) -> None:
        super().__init__(f"{str(name)!r} is not a valid member of Spring.")
        self.name = str(name)
