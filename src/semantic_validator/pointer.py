"""Pointer model for parsing and canonicalizing $ref strings."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

CanonicalPointer = Tuple[str, ...]


class MalformedFragment(ValueError):
    """Raised when a reference fragment is not a valid JSON pointer."""


@dataclass(frozen=True)
class ReferenceDescriptor:
    """Parsed form of a $ref string."""

    external: str
    fragment: Optional[str] = None  # None when the ref has no '#'

    @property
    def is_local(self) -> bool:
        """True when the reference targets the same document."""
        return self.external == ""

    @property
    def has_fragment(self) -> bool:
        return self.fragment is not None


def parse_reference(ref: str) -> ReferenceDescriptor:
    """
    Split a $ref string on its first '#'.

    Args:
        ref: Reference string (e.g., "#/definitions/Pet", "other.yaml#/Pet")

    Returns:
        ReferenceDescriptor with the external part and the optional fragment
    """
    external, separator, fragment = ref.partition("#")
    if not separator:
        return ReferenceDescriptor(external=external)
    return ReferenceDescriptor(external=external, fragment=fragment)


def is_valid_fragment(fragment: str) -> bool:
    """A fragment is a JSON pointer when it is empty or starts with '/'."""
    return fragment == "" or fragment.startswith("/")


def unescape_token(token: str) -> str:
    """Decode a single JSON pointer token. '~1' is replaced before '~0'."""
    return token.replace("~1", "/").replace("~0", "~")


def escape_token(token: str) -> str:
    """Encode a literal key as a JSON pointer token."""
    return token.replace("~", "~0").replace("/", "~1")


def to_canonical_pointer(fragment: str) -> CanonicalPointer:
    """
    Convert a fragment into its sequence of unescaped tokens.

    Args:
        fragment: Text after the first '#' of a $ref

    Returns:
        Tuple of unescaped tokens; the empty fragment yields the empty tuple

    Raises:
        MalformedFragment: If the fragment is non-empty and lacks a leading '/'
    """
    if fragment == "":
        return ()

    if not fragment.startswith("/"):
        raise MalformedFragment(f"Fragment must begin with '/': {fragment!r}")

    # The leading '/' produces an empty first segment
    tokens = fragment.split("/")[1:]
    return tuple(unescape_token(token) for token in tokens)


def format_pointer(path: Iterable[Union[str, int]]) -> str:
    """Render a document path as a same-document reference, e.g. '#/paths/~1pets'."""
    return "#" + "".join("/" + escape_token(str(segment)) for segment in path)
