from __future__ import annotations

from lingssg.core.exceptions import LingSsgError

METADATA_TERMINATOR = "+++"


class CompileError(LingSsgError):
    """Base class for page compilation failures."""


class SplitError(CompileError):
    """The page could not be split into metadata and body."""


class MissingMetadataTerminator(SplitError):
    def __init__(self) -> None:
        super().__init__(f"Missing metadata terminator line {METADATA_TERMINATOR}")


class ParseError(CompileError):
    """The metadata or the Markdown body could not be parsed."""


class ExpandError(CompileError):
    """The parsed page could not be turned into a template."""


class ToHtmlError(ExpandError):
    """A Markdown node could not be rendered to HTML."""


class UnsupportedNode(ToHtmlError):
    def __init__(self, node_type: str, *, action: str = "Converting") -> None:
        super().__init__(
            f"{action} markdown node {node_type} is not supported",
            context={"node": node_type},
        )
        self.node_type = node_type


class SlugifyError(UnsupportedNode):
    def __init__(self, node_type: str) -> None:
        super().__init__(node_type, action="Slugifying")


class UnclosedBlock(ToHtmlError):
    def __init__(self, near: str) -> None:
        super().__init__(f"HTML/Markdown template block not closed, near {near}", context={"near": near})
        self.near = near


__all__ = [
    "METADATA_TERMINATOR",
    "CompileError",
    "SplitError",
    "MissingMetadataTerminator",
    "ParseError",
    "ExpandError",
    "ToHtmlError",
    "UnsupportedNode",
    "SlugifyError",
    "UnclosedBlock",
]
