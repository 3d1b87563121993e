"""
Tests for the structmeta command line
"""

import json

from structmeta.cli import main


class TestCli:
    """Test end-to-end runs through main()."""

    def test_single_input_default_output(self, user_go_file):
        assert main([str(user_go_file)]) == 0

        out = user_go_file.with_suffix(".json")
        data = json.loads(out.read_text())
        assert data["kind"] == "go"
        assert data["data"][0]["Name"] == "User"

    def test_stdout_output(self, user_go_file, capsys):
        assert main(["-o", "-", str(user_go_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["srcKind"] == "go"

    def test_kind_option(self, user_go_file, capsys):
        assert main(["-kind", "graphql", "-o", "-", str(user_go_file)]) == 0
        assert json.loads(capsys.readouterr().out)["kind"] == "graphql"

    def test_multiple_inputs_need_output(self, user_go_file, order_go_file, temp_dir):
        assert main([str(user_go_file), str(order_go_file)]) == 1
        assert not user_go_file.with_suffix(".json").exists()

    def test_multiple_inputs_with_output(self, user_go_file, order_go_file, temp_dir):
        out = temp_dir / "models.json"
        assert main(["-o", str(out), str(user_go_file), str(order_go_file)]) == 0
        keys = [e["key"] for e in json.loads(out.read_text())["data"]]
        assert keys == sorted(keys)

    def test_bad_input_writes_nothing(self, user_go_file, broken_go_file, temp_dir):
        out = temp_dir / "models.json"
        assert main(["-o", str(out), str(user_go_file), broken_go_file.as_posix()]) == 1
        assert not out.exists()

    def test_missing_input(self, temp_dir):
        out = temp_dir / "models.json"
        assert main(["-o", str(out), str(temp_dir / "missing.go")]) == 1
        assert not out.exists()

    def test_non_utf8_input(self, temp_dir):
        source = temp_dir / "latin1.go"
        source.write_bytes(b"package p\n\n// caf\xe9\ntype A struct{}\n")
        out = temp_dir / "models.json"
        assert main(["-o", str(out), str(source)]) == 1
        assert not out.exists()

    def test_unwritable_output(self, user_go_file, temp_dir):
        out = temp_dir / "no" / "such" / "dir" / "out.json"
        assert main(["-o", str(out), str(user_go_file)]) == 1

    def test_kind_from_environment(self, user_go_file, capsys, monkeypatch):
        monkeypatch.setenv("STRUCTMETA_KIND", "proto")
        assert main(["-o", "-", str(user_go_file)]) == 0
        assert json.loads(capsys.readouterr().out)["kind"] == "proto"

    def test_kind_from_config_file(self, user_go_file, capsys, tmp_path):
        (tmp_path / ".structmeta.yaml").write_text("kind: sql\n")
        assert main(["-o", "-", str(user_go_file)]) == 0
        assert json.loads(capsys.readouterr().out)["kind"] == "sql"

    def test_invalid_config_file(self, user_go_file, tmp_path):
        (tmp_path / ".structmeta.yaml").write_text("- not\n- a mapping\n")
        assert main(["-o", "-", str(user_go_file)]) == 1
