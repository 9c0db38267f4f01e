import logging
from typing import List, Optional, Sequence, Union
from .base import ImportResolver
from ..models import ResolutionConfiguration, ResolutionStrategy
from ..preferences import PreferenceLoader, default_configuration
from ..uris import (
    FILE_PREFIX,
    PLATFORM_RESOURCE_PREFIX,
    SEPARATOR,
    ExistenceCheck,
    Uri,
    parse_uri,
    referred_resource_exists,
    resource_owner_project,
    split_segments,
)

logger = logging.getLogger(__name__)

# Position of the source folder in the owner's base segments: [project, source_folder, ...]
SOURCE_FOLDER_INDEX = 1


def resolve(
    import_uri: str,
    owner_file_uri: Union[str, Uri],
    existence_check: ExistenceCheck,
    config: ResolutionConfiguration,
) -> Optional[str]:
    """
    Finds the workspace URI of the file named by a relative import.

    The import URI is relative to the file where the import is. Protoc works
    fine with that, but the editor needs "platform:/resource" plus the parent
    folders of the importing file. Given:

    - protobuf-test (project)
      - folder
        - proto2.proto
      - proto1.proto

    importing "folder/proto2.proto" from proto1.proto has to become
    "platform:/resource/protobuf-test/folder/proto2.proto".

    Returns the first candidate that exists, or None.
    """
    if import_uri.startswith((FILE_PREFIX, PLATFORM_RESOURCE_PREFIX)):
        return import_uri
    import_segments = split_segments(import_uri)
    first_import_segment = import_segments[0] if import_segments else None
    base_segments = _remove_first_and_last(parse_uri(owner_file_uri).segments)

    if config.strategy is ResolutionStrategy.SINGLE_FOLDER:
        return _try_candidate(import_uri, first_import_segment, base_segments, existence_check)

    for folder_name in config.folder_names:
        if len(base_segments) <= SOURCE_FOLDER_INDEX:
            logger.debug(f"Skipping folder '{folder_name}': base {base_segments} has no source folder segment")
            continue
        segments = list(base_segments)
        segments[SOURCE_FOLDER_INDEX] = folder_name
        fixed = _try_candidate(import_uri, first_import_segment, segments, existence_check)
        if fixed is not None:
            return fixed
    return None


def fix_import_uri(
    import_uri: str,
    owner_file_uri: Union[str, Uri],
    existence_check: ExistenceCheck,
    config: ResolutionConfiguration,
) -> str:
    """Resolved form of ``import_uri``, or ``import_uri`` itself when nothing matches."""
    fixed = resolve(import_uri, owner_file_uri, existence_check, config)
    logger.debug(f"{owner_file_uri} : {import_uri} : {fixed}")
    if fixed is None:
        return import_uri
    return fixed


def _remove_first_and_last(segments: Sequence[str]) -> List[str]:
    # Drops the root marker and the file name, whatever the scheme
    if len(segments) < 2:
        return []
    return list(segments[1:-1])


def _try_candidate(
    import_uri: str,
    first_import_segment: Optional[str],
    segments: Sequence[str],
    existence_check: ExistenceCheck,
) -> Optional[str]:
    prefix = [PLATFORM_RESOURCE_PREFIX]
    for segment in segments:
        # The import's own path takes over from here
        if segment == first_import_segment:
            break
        prefix.append(SEPARATOR)
        prefix.append(segment)
    prefix.append(SEPARATOR)
    candidate = "".join(prefix) + import_uri
    if referred_resource_exists(candidate, existence_check):
        return candidate
    return None


class ProtoImportResolver(ImportResolver):
    """
    Resolves .proto imports against a workspace.
    The path preferences of the importing file's project are loaded on every
    call, so edits to them apply to the next resolution.
    """

    def __init__(
        self,
        existence_check: ExistenceCheck,
        preference_loader: Optional[PreferenceLoader] = None,
        config: Optional[ResolutionConfiguration] = None,
    ):
        self.existence_check = existence_check
        self.preference_loader = preference_loader
        self.config = config

    def configuration_for(self, source_file: Union[str, Uri]) -> ResolutionConfiguration:
        if self.config is not None:
            return self.config
        project = resource_owner_project(source_file)
        if self.preference_loader is None:
            return default_configuration()
        if project is None:
            return self.preference_loader.defaults
        return self.preference_loader.load_for(project)

    def resolve(self, source_file: Union[str, Uri], import_string: str) -> Optional[str]:
        config = self.configuration_for(source_file)
        return resolve(import_string, source_file, self.existence_check, config)

    def fix(self, source_file: Union[str, Uri], import_string: str) -> str:
        config = self.configuration_for(source_file)
        return fix_import_uri(import_string, source_file, self.existence_check, config)
