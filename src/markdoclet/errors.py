"""Exception classes for markdoclet.

Provides standardized exceptions for error handling throughout markdoclet.

Failures raised by the markup renderer or a reference resolver are not
wrapped: they propagate to the caller unchanged.
"""

from __future__ import annotations


class MarkdocletError(Exception):
    """Base exception for all markdoclet errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(MarkdocletError):
    """Error while rendering a documentation comment.

    Raised when the comment renderer cannot produce complete output.
    There is no partial-success mode: a comment renders fully or raises.
    """

    pass


class BufferStateError(RenderError, AssertionError):
    """Internal invariant violation in the buffering state machine.

    Raised when a buffering span is opened while another is open, or when a
    render finishes with pending text that was never flushed. Always a
    defect in the renderer, never a problem with the input comment.
    """

    pass


class MalformedNodeError(RenderError):
    """A comment node carries a field value outside its allowed set."""

    def __init__(self, node_type: str, message: str) -> None:
        """Initialize malformed node error.
        
        Args:
            node_type: Class name of the offending node (e.g., "Attribute")
            message: Description of the problem
        """
        self.node_type = node_type
        super().__init__(f"{node_type}: {message}")


class DeclarationError(MarkdocletError):
    """Error in a declaration handed to the signature helpers.

    Raised for declarations the compiler could never produce, such as a
    varargs parameter whose type is not an array.
    """

    def __init__(self, declaration: str, message: str) -> None:
        """Initialize declaration error.
        
        Args:
            declaration: Name of the declaration being printed
            message: Description of the problem
        """
        self.declaration = declaration
        super().__init__(f"Declaration '{declaration}': {message}")
