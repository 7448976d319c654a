"""URI parsing and positional segment helpers.

Artifact and local URIs rarely share an absolute prefix, but the tail of their
paths usually matches. These helpers turn a URI into a list of comparable
segments so the two can be lined up position by position.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import NamedTuple
from urllib.parse import unquote

from urirebase.exceptions import InvalidUriError

# RFC 3986, appendix B.
_URI_PATTERN = re.compile(r"^(([^:/?#]+):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?$", re.DOTALL)
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_EXTENSION_PATTERN = re.compile(r"\.(\w+)$")


class ParsedUri(NamedTuple):
    scheme: str
    authority: str
    path: str
    query: str
    fragment: str


def parse_uri(uri: str) -> ParsedUri:
    """Strictly parse an absolute URI.

    Raises InvalidUriError for relative references and malformed schemes.
    """
    match = _URI_PATTERN.match(uri)
    if not match or not match.group(2):
        raise InvalidUriError(uri)
    scheme = match.group(2)
    if not _SCHEME_PATTERN.match(scheme):
        raise InvalidUriError(uri, "illegal scheme")
    authority = match.group(4) or ""
    path = match.group(5) or ""
    if match.group(3) is not None and path and not path.startswith("/"):
        raise InvalidUriError(uri, "path must start with '/' when an authority is present")
    if match.group(3) is None and path.startswith("//"):
        raise InvalidUriError(uri, "path cannot begin with '//' without an authority")
    return ParsedUri(scheme, authority, path, match.group(7) or "", match.group(9) or "")


def split_uri(uri: str | None) -> list[str]:
    """Split a URI into ["scheme://authority", seg1, seg2, ...].

    Query and fragment are ignored.
    """
    if uri is None:
        return []
    parsed = parse_uri(uri)
    head = f"{parsed.scheme}://{parsed.authority}"
    if not parsed.path:
        return [head]
    path = parsed.path[1:] if parsed.path.startswith("/") else parsed.path
    return [head, *path.split("/")]


def join_segments(segments: Sequence[str]) -> str:
    return "/".join(segments)


def uri_filename(uri: str) -> str:
    """Percent-decoded last path segment."""
    path = parse_uri(uri).path
    return unquote(path.rsplit("/", 1)[-1])


def uri_extension(uri: str) -> str:
    match = _EXTENSION_PATTERN.search(uri)
    return match.group(1) if match else ""


def common_suffix_length(a: Sequence[str], b: Sequence[str]) -> int:
    """Count pairwise-equal elements from the ends inward, stopping at the first mismatch."""
    count = 0
    for left, right in zip(reversed(a), reversed(b)):
        if left != right:
            break
        count += 1
    return count


def common_indices(a: Sequence[str], b: Sequence[str]) -> Iterator[tuple[int, int]]:
    """Yield every (i, j) where a[i] == b[j], outer loop over a."""
    for a_index, a_part in enumerate(a):
        for b_index, b_part in enumerate(b):
            if a_part == b_part:
                yield a_index, b_index
