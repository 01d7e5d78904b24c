# -------------------------------------
# nodeset errors
# -------------------------------------
"""
Exceptions raised while parsing or merging nodeset notation.

Everything derives from NodeSetError (a ValueError), so callers that only
care about "bad input" can catch that one class.
"""

__all__ = [
    "NodeSetError",
    "ParseError",
    "NotANumberError",
    "InvalidStepError",
    "GroupRangeSetError",
    "MalformedNodeError",
    "MergeConflictError",
]


class NodeSetError(ValueError):
    pass


class ParseError(NodeSetError):
    """Base class for notation that could not be parsed. `text` is the offending input."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class NotANumberError(ParseError):
    def __init__(self, text: str):
        super().__init__(f"not a number: {text!r}", text)


class InvalidStepError(ParseError):
    def __init__(self, text: str):
        super().__init__(f"invalid step (must be >= 1): {text!r}", text)


class GroupRangeSetError(ParseError):
    def __init__(self, text: str, cause: ParseError | None = None):
        msg = f"invalid range group: {text!r}"
        if cause is not None:
            msg = f"{msg} ({cause})"
        super().__init__(msg, text)


class MalformedNodeError(ParseError):
    def __init__(self, text: str):
        super().__init__(f"malformed node name (nested or unbalanced brackets): {text!r}", text)


class MergeConflictError(NodeSetError):
    """A node could be merged into more than one existing entry."""
