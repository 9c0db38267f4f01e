import logging
from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote
from .config import WORKSPACE_ROOT
from .uris import PLATFORM_RESOURCE_PREFIX, SEPARATOR, Uri, UriScheme, parse_uri

logger = logging.getLogger(__name__)


class WorkspaceResourceChecker:
    """
    Existence check for "platform:/resource" URIs backed by a directory on disk.
    Each project is a direct child folder of the workspace root.
    """

    def __init__(self, workspace_root: Optional[Union[str, Path]] = None):
        root = Path(workspace_root) if workspace_root is not None else WORKSPACE_ROOT
        self.workspace_root = root.resolve()

    def __call__(self, uri: Union[str, Uri]) -> bool:
        return self.exists(uri)

    def file_for(self, uri: Union[str, Uri]) -> Optional[Path]:
        """Maps a workspace URI onto the workspace folder, or None if it can't be mapped."""
        uri = parse_uri(uri)
        if uri.scheme is not UriScheme.WORKSPACE_RESOURCE:
            return None
        # Drop the 'resource' marker; the project folder must be named
        parts = [unquote(segment) for segment in uri.segments[1:]]
        if not parts:
            return None
        candidate = self.workspace_root.joinpath(*parts).resolve()
        try:
            candidate.relative_to(self.workspace_root)
        except ValueError:
            logger.debug(f"{uri.text} points outside workspace {self.workspace_root}")
            return None
        return candidate

    def exists(self, uri: Union[str, Uri]) -> bool:
        path = self.file_for(uri)
        return path is not None and path.is_file()

    def platform_uri_for(self, path: Union[str, Path]) -> Optional[str]:
        """Workspace URI of a file under the workspace root, or None if it is outside."""
        resolved = Path(path).resolve()
        try:
            relative = resolved.relative_to(self.workspace_root)
        except ValueError:
            return None
        if not relative.parts:
            return None
        return PLATFORM_RESOURCE_PREFIX + SEPARATOR + relative.as_posix()
