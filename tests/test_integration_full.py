import json
import pytest
from proto_uri_fixer.preferences import PreferenceLoader
from proto_uri_fixer.resolution.proto import ProtoImportResolver
from proto_uri_fixer.workspace import WorkspaceResourceChecker

@pytest.fixture
def workspace(tmp_path):
    # /workspace
    #   single/
    #     proto1.proto
    #     folder/proto2.proto
    #   multi/
    #     .settings/proto_paths.json   (MULTI_FOLDER: src, gen)
    #     src/api/service.proto
    #     gen/api/types.proto
    root = tmp_path / "workspace"
    (root / "single" / "folder").mkdir(parents=True)
    (root / "single" / "proto1.proto").touch()
    (root / "single" / "folder" / "proto2.proto").touch()

    (root / "multi" / ".settings").mkdir(parents=True)
    (root / "multi" / ".settings" / "proto_paths.json").write_text(
        json.dumps({"fileResolutionType": "MULTI_FOLDER", "folderNames": "src,gen"}), encoding="utf-8"
    )
    (root / "multi" / "src" / "api").mkdir(parents=True)
    (root / "multi" / "src" / "api" / "service.proto").touch()
    (root / "multi" / "gen" / "api").mkdir(parents=True)
    (root / "multi" / "gen" / "api" / "types.proto").touch()
    return root

@pytest.fixture
def resolver(workspace):
    checker = WorkspaceResourceChecker(workspace)
    return ProtoImportResolver(checker, preference_loader=PreferenceLoader(workspace))

def test_single_folder_project(resolver):
    owner = "platform:/resource/single/proto1.proto"
    assert resolver.fix(owner, "folder/proto2.proto") == "platform:/resource/single/folder/proto2.proto"
    assert resolver.fix(owner, "folder/missing.proto") == "folder/missing.proto"

def test_multi_folder_project(resolver):
    owner = "platform:/resource/multi/src/api/service.proto"
    assert resolver.fix(owner, "api/types.proto") == "platform:/resource/multi/gen/api/types.proto"
    assert resolver.fix(owner, "api/service.proto") == "platform:/resource/multi/src/api/service.proto"

def test_already_resolved_import(resolver):
    owner = "platform:/resource/multi/src/api/service.proto"
    assert resolver.fix(owner, "platform:/resource/single/proto1.proto") == "platform:/resource/single/proto1.proto"
