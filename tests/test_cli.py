import json
import pytest
from proto_uri_fixer.cli import main

@pytest.fixture
def workspace(tmp_path):
    root = tmp_path / "workspace"
    (root / "proj" / "src" / "api").mkdir(parents=True)
    (root / "proj" / "gen" / "api").mkdir(parents=True)
    (root / "proj" / "src" / "api" / "service.proto").touch()
    (root / "proj" / "gen" / "api" / "types.proto").touch()
    return root

def test_cli_single_folder(workspace, capsys):
    owner = str(workspace / "proj" / "src" / "api" / "service.proto")
    assert main(["--workspace", str(workspace), owner, "api/service.proto", "api/types.proto"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "api/service.proto -> platform:/resource/proj/src/api/service.proto",
        "api/types.proto -> api/types.proto",
    ]

def test_cli_folder_override(workspace, capsys):
    owner = "platform:/resource/proj/src/api/service.proto"
    code = main([
        "--workspace", str(workspace),
        "--strategy", "MULTI_FOLDER",
        "--folders", "src,gen",
        owner, "api/types.proto",
    ])
    assert code == 0
    assert capsys.readouterr().out.strip() == "api/types.proto -> platform:/resource/proj/gen/api/types.proto"

def test_cli_uses_project_preferences(workspace, capsys):
    settings = workspace / "proj" / ".settings"
    settings.mkdir()
    (settings / "proto_paths.json").write_text(
        json.dumps({"fileResolutionType": "MULTI_FOLDER", "folderNames": ["gen"]}), encoding="utf-8"
    )
    owner = "platform:/resource/proj/src/api/service.proto"
    assert main(["--workspace", str(workspace), owner, "api/types.proto"]) == 0
    assert capsys.readouterr().out.strip() == "api/types.proto -> platform:/resource/proj/gen/api/types.proto"

def test_cli_owner_outside_workspace(workspace, tmp_path, capsys):
    outside = tmp_path / "elsewhere.proto"
    outside.touch()
    assert main(["--workspace", str(workspace), str(outside), "a.proto"]) == 2
    assert capsys.readouterr().out == ""
