import base64
import copy
import datetime
import json
import os

import pytest

from anymc.common.launcher import (
    LAUNCHER_PROFILES_FILE,
    generate_profile,
    icon_data_uri,
    write_launch_scripts,
    write_version_profile,
)
from anymc.exceptions import DecodeError
from anymc.model.quilt import QuiltClientProfile


def _write_profiles(tmp_path, data):
    path = tmp_path / LAUNCHER_PROFILES_FILE
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_generate_profile_adds_an_entry(tmp_path, minecraft, quilt_loader, launcher_profiles_json):
    path = _write_profiles(tmp_path, launcher_profiles_json)

    profile_id = generate_profile(tmp_path, minecraft, quilt_loader)

    assert profile_id == "quilt-loader-0.19.1-1.19.4"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["profiles"]) == 3
    for key, value in launcher_profiles_json["profiles"].items():
        assert data["profiles"][key] == value
    assert data["settings"] == launcher_profiles_json["settings"]
    assert data["version"] == 3

    entry = data["profiles"][profile_id]
    assert entry["name"] == "quilt-loader-1.19.4"
    assert entry["type"] == "custom"
    assert entry["lastVersionId"] == profile_id
    assert entry["icon"] == icon_data_uri(quilt_loader.icon())
    assert datetime.datetime.fromisoformat(entry["created"]).tzinfo is not None


def test_generate_profile_overwrites_the_same_id(tmp_path, minecraft, quilt_loader, launcher_profiles_json):
    existing = copy.deepcopy(launcher_profiles_json)
    existing["profiles"]["quilt-loader-0.19.1-1.19.4"] = {"name": "stale", "type": "custom", "lastVersionId": "x"}
    path = _write_profiles(tmp_path, existing)

    generate_profile(tmp_path, minecraft, quilt_loader)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["profiles"]) == 3
    assert data["profiles"]["quilt-loader-0.19.1-1.19.4"]["name"] == "quilt-loader-1.19.4"
    assert data["profiles"]["def456"] == launcher_profiles_json["profiles"]["def456"]


def test_unknown_top_level_keys_survive(tmp_path, minecraft, quilt_loader, launcher_profiles_json):
    launcher_profiles_json["authenticationDatabase"] = {"user": {"username": "steve"}}
    path = _write_profiles(tmp_path, launcher_profiles_json)

    generate_profile(tmp_path, minecraft, quilt_loader)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["authenticationDatabase"] == {"user": {"username": "steve"}}


def test_missing_profiles_file_is_not_created(tmp_path, minecraft, quilt_loader):
    with pytest.raises(OSError):
        generate_profile(tmp_path, minecraft, quilt_loader)
    assert not (tmp_path / LAUNCHER_PROFILES_FILE).exists()


@pytest.mark.parametrize("data", [{"profiles": {}}, {"profiles": [], "settings": {}, "version": 3}])
def test_malformed_profiles_file(tmp_path, minecraft, quilt_loader, data):
    _write_profiles(tmp_path, data)
    with pytest.raises(DecodeError):
        generate_profile(tmp_path, minecraft, quilt_loader)


def test_icon_data_uri():
    uri = icon_data_uri(b"\x89PNG")
    assert uri.startswith("data:image/png;base64,")
    assert base64.b64decode(uri.split(",", 1)[1]) == b"\x89PNG"


def test_write_version_profile_replaces_the_directory(tmp_path, client_profile_json):
    profile_dir = tmp_path / "versions" / "quilt-loader-0.19.1-1.19.4"
    profile_dir.mkdir(parents=True)
    (profile_dir / "leftover.txt").write_text("old")

    profile = QuiltClientProfile.model_validate(client_profile_json)
    assert write_version_profile(tmp_path, "quilt-loader-0.19.1-1.19.4", profile) == profile_dir

    assert sorted(p.name for p in profile_dir.iterdir()) == [
        "quilt-loader-0.19.1-1.19.4.jar",
        "quilt-loader-0.19.1-1.19.4.json",
    ]
    assert (profile_dir / "quilt-loader-0.19.1-1.19.4.jar").stat().st_size == 0
    written = json.loads((profile_dir / "quilt-loader-0.19.1-1.19.4.json").read_text(encoding="utf-8"))
    assert written["inheritsFrom"] == "1.19.4"
    assert written["mainClass"] == "org.quiltmc.loader.impl.launch.knot.KnotClient"
    assert written["arguments"]["jvm"] == ["-Dloader.disable_beacon=true"]


def test_write_launch_scripts(tmp_path):
    sh, bat = write_launch_scripts(tmp_path, "quilt-server-launch.jar")

    assert 'java -jar "quilt-server-launch.jar" nogui' in sh.read_text(encoding="utf-8")
    assert 'java -jar "quilt-server-launch.jar" nogui' in bat.read_text(encoding="utf-8")
    if os.name != "nt":
        assert os.access(sh, os.X_OK)
