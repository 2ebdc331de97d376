import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from asyncapi_model.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliCheck:
    def test_check_prints_summary(self):
        runner = CliRunner()
        result = runner.invoke(main, ["check", str(FIXTURES / "streetlights-kafka.yml")])

        assert result.exit_code == 0
        assert "AsyncAPI 2.3.0 'Streetlights Kafka API'" in result.output
        assert "2 channels, 2 servers, 2 messages" in result.output

    def test_check_invalid_document(self, tmp_path):
        doc = tmp_path / "broken.yaml"
        doc.write_text("asyncapi: 2.3.0\ninfo:\n  title: T\nchannels: {}\n", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, ["check", str(doc)])

        assert result.exit_code == 1
        assert "not a valid AsyncAPI document" in result.output
        assert "/info/version" in result.output

    def test_check_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["check", str(tmp_path / "nope.yaml")])
        assert result.exit_code != 0


class TestCliConvert:
    def test_convert_yaml_to_json(self, tmp_path):
        output = tmp_path / "out.json"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "streetlights-kafka.yml"),
            "-o", str(output),
        ])

        assert result.exit_code == 0
        assert f"Wrote {output}" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["asyncapi"] == "2.3.0"
        assert data["servers"]["scram-connections"]["security"] == {"saslScram": []}

    def test_convert_json_to_yaml(self, tmp_path):
        output = tmp_path / "out" / "rpc.yaml"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "rpc-server.json"),
            "-o", str(output),
            "--indent", "4",
        ])

        assert result.exit_code == 0
        text = output.read_text(encoding="utf-8")
        assert "\n    title: RPC Server\n" in text
        assert yaml.safe_load(text) == json.loads((FIXTURES / "rpc-server.json").read_text())

    def test_explicit_format_wins_over_suffix(self, tmp_path):
        output = tmp_path / "out.yaml"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "rpc-server.json"),
            "-o", str(output),
            "--format", "json",
        ])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["id"] == "urn:example:rpc-server"

    def test_format_from_environment_without_suffix(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ASYNCAPI_MODEL_OUTPUT_FORMAT", "json")
        output = tmp_path / "out"
        runner = CliRunner()
        result = runner.invoke(main, [
            "convert", str(FIXTURES / "streetlights-kafka.yml"),
            "-o", str(output),
        ])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8"))["info"]["title"] == "Streetlights Kafka API"
