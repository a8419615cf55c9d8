"""Fatal errors raised while building or resolving the declaration model."""


class GenerationError(Exception):
    """Base class for errors that abort a generation run."""


class InvalidItemError(GenerationError):
    """A member record is structurally invalid (e.g. params on a property)."""


class ResolutionError(GenerationError):
    """A name that must resolve could not be found."""


class CyclicInheritanceError(ResolutionError):
    """A class was reached again through ``extends`` while still resolving."""

    def __init__(self, chain: list[str]) -> None:
        """Store the offending chain, ending with the repeated class."""
        self.chain = chain
        super().__init__(f"Cyclic inheritance; chain={' -> '.join(chain)}")


class TypeSyntaxError(ValueError):
    """A type annotation does not match the supported grammar."""

    def __init__(self, text: str, position: int, reason: str) -> None:
        """Record where in the annotation parsing stopped."""
        self.text = text
        self.position = position
        super().__init__(f"{reason} at {position} in {text!r}")
