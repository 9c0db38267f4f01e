"""
URI helpers for import resolution.

Only the segment conventions of the workspace URI model are implemented here:
``platform:/resource/proj/a/b.proto`` has the segments
``("resource", "proj", "a", "b.proto")``, where ``resource`` is the
workspace-root marker and ``proj`` the project name.
"""
import re
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Tuple, Union
from urllib.parse import unquote
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

PLATFORM_RESOURCE_PREFIX = "platform:/resource"
FILE_PREFIX = "file:"
SEPARATOR = "/"

# Answers "does the resource at this URI exist?"
ExistenceCheck = Callable[[str], bool]

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")


class UriScheme(str, Enum):
    LOCAL_FILE = "file"
    WORKSPACE_RESOURCE = "platform-resource"
    UNKNOWN = "unknown"


class Uri(BaseModel):
    """An addressable location split into its scheme and path segments."""
    model_config = ConfigDict(frozen=True)

    text: str
    scheme: UriScheme
    segments: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.text


def scheme_of(text: str) -> UriScheme:
    # "resource" must be a whole segment
    if text == PLATFORM_RESOURCE_PREFIX or text.startswith(PLATFORM_RESOURCE_PREFIX + SEPARATOR):
        return UriScheme.WORKSPACE_RESOURCE
    if text.startswith(FILE_PREFIX):
        return UriScheme.LOCAL_FILE
    return UriScheme.UNKNOWN


def split_segments(path: str) -> Tuple[str, ...]:
    """Splits a path on '/', dropping the empty pieces of leading or doubled separators."""
    return tuple(segment for segment in path.split(SEPARATOR) if segment)


def _path_part(text: str) -> str:
    """Strips the scheme and any '//authority' from a URI string."""
    match = _SCHEME_RE.match(text)
    if not match:
        return text
    rest = text[match.end():]
    if rest.startswith("//"):
        authority_end = rest.find(SEPARATOR, 2)
        rest = rest[authority_end:] if authority_end != -1 else ""
    return rest


def parse_uri(text: Union[str, Uri]) -> Uri:
    """
    Decomposes a URI string. The scheme is classified once, here.

    Strings without a recognized scheme (e.g. the relative path of an import
    statement) are split as plain paths.
    """
    if isinstance(text, Uri):
        return text
    scheme = scheme_of(text)
    if scheme is UriScheme.WORKSPACE_RESOURCE:
        # Keep the 'resource' marker as the first segment
        path = text[len("platform:"):]
    else:
        path = _path_part(text)
    return Uri(text=text, scheme=scheme, segments=split_segments(path))


def segments_without_file_name(uri: Union[str, Uri]) -> Tuple[str, ...]:
    """
    Returns the segments of the given URI without the file name (last segment).
    For workspace URIs the root marker (first segment) is dropped as well.
    """
    uri = parse_uri(uri)
    segments = list(uri.segments)
    if not segments:
        return ()
    if uri.scheme is UriScheme.WORKSPACE_RESOURCE:
        segments.pop(0)
    if segments:
        segments.pop()
    return tuple(segments)


def scheme_prefix(uri: Union[str, Uri]) -> str:
    """Returns "file:", "platform:/resource", or "" for anything else."""
    scheme = parse_uri(uri).scheme
    if scheme is UriScheme.LOCAL_FILE:
        return FILE_PREFIX
    if scheme is UriScheme.WORKSPACE_RESOURCE:
        return PLATFORM_RESOURCE_PREFIX
    return ""


def local_path_of(uri: Union[str, Uri]) -> Optional[Path]:
    """Filesystem path of a file: URI, or None for any other scheme."""
    uri = parse_uri(uri)
    if uri.scheme is not UriScheme.LOCAL_FILE:
        return None
    path = unquote(_path_part(uri.text))
    return Path(path) if path else None


def referred_resource_exists(uri: Union[str, Uri], existence_check: ExistenceCheck) -> bool:
    """
    Indicates whether the resource or file referred by the given URI exists.

    Local files are checked on disk; workspace resources are delegated to
    ``existence_check``. Any other scheme, or a failing check, gives False.
    """
    uri = parse_uri(uri)
    if uri.scheme is UriScheme.LOCAL_FILE:
        path = local_path_of(uri)
        if path is None:
            return False
        try:
            return path.exists()
        except OSError as e:
            logger.warning(f"Existence check failed for {uri.text}: {e}")
            return False
    if uri.scheme is UriScheme.WORKSPACE_RESOURCE:
        try:
            return bool(existence_check(uri.text))
        except Exception as e:
            logger.warning(f"Existence check failed for {uri.text}: {e}")
            return False
    return False


def resource_owner_project(uri: Union[str, Uri]) -> Optional[str]:
    """
    Returns the name of the project containing the file referred by the URI,
    or None if the URI does not refer to a file in the workspace.
    """
    uri = parse_uri(uri)
    if uri.scheme is not UriScheme.WORKSPACE_RESOURCE:
        return None
    # marker, project, and at least the file name
    if len(uri.segments) < 3:
        return None
    return uri.segments[1]
