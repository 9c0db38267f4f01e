"""Command-line front-end: fix the import URIs of one .proto file."""

import sys
import argparse
import logging
from typing import List, Optional
from .config import LOG_FORMAT, LOG_LEVEL, WORKSPACE_ROOT
from .models import ResolutionConfiguration, ResolutionStrategy
from .preferences import PreferenceLoader
from .resolution.proto import ProtoImportResolver
from .uris import UriScheme, scheme_of
from .workspace import WorkspaceResourceChecker

logger = logging.getLogger("proto_uri_fixer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve relative .proto imports to platform:/resource URIs."
    )
    parser.add_argument(
        "owner",
        help="File containing the imports: a platform:/resource URI or a path under the workspace",
    )
    parser.add_argument("imports", nargs="+", help="Import strings as written in the file")
    parser.add_argument(
        "--workspace",
        default=str(WORKSPACE_ROOT),
        help="Workspace root folder; each project is a direct child of it",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in ResolutionStrategy],
        help="Override the project's file resolution type",
    )
    parser.add_argument(
        "--folders",
        help="Comma-separated folder names to try (MULTI_FOLDER)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    checker = WorkspaceResourceChecker(args.workspace)
    owner = args.owner
    if scheme_of(owner) is not UriScheme.WORKSPACE_RESOURCE:
        owner = checker.platform_uri_for(owner)
        if owner is None:
            logger.error(f"{args.owner} is not inside workspace {checker.workspace_root}")
            return 2

    loader = PreferenceLoader(checker.workspace_root)
    resolver = ProtoImportResolver(checker, preference_loader=loader)
    if args.strategy or args.folders is not None:
        loaded = resolver.configuration_for(owner)
        config = ResolutionConfiguration(
            strategy=args.strategy or loaded.strategy,
            folder_names=args.folders if args.folders is not None else loaded.folder_names,
        )
        resolver = ProtoImportResolver(checker, config=config)

    for import_uri in args.imports:
        print(f"{import_uri} -> {resolver.fix(owner, import_uri)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
