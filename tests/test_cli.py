"""Tests for the ourairports-api command line."""

import json

import pytest

from ourairports_api.cli import create_parser, main


class TestDump:

    def test_dump_dataset(self, csv_dir, capsys):
        assert main(["dump", "countries", "--data-dir", str(csv_dir)]) == 0

        out = capsys.readouterr().out
        data = json.loads(out)
        assert [c["id"] for c in data] == [302618, 302672, 302734, 302755, 302791]
        assert "\n" not in out.strip()

    def test_dump_record_pretty(self, csv_dir, capsys):
        assert main(["dump", "airports", "--id", "2434", "--pretty", "--data-dir", str(csv_dir)]) == 0

        out = capsys.readouterr().out
        assert json.loads(out)["ident"] == "EGLL"
        assert '\n  "id": 2434' in out

    def test_dump_unknown_id(self, csv_dir, capsys):
        assert main(["dump", "runways", "--id", "1", "--data-dir", str(csv_dir)]) == 2
        assert capsys.readouterr().out == ""

    def test_dump_fetch_failure(self, tmp_path, capsys):
        assert main(["dump", "regions", "--data-dir", str(tmp_path)]) == 1
        assert capsys.readouterr().out == ""

    def test_unknown_dataset(self):
        with pytest.raises(SystemExit):
            main(["dump", "heliports"])


class TestParser:

    def test_dump_defaults(self):
        args = create_parser().parse_args(["dump", "airport-frequencies"])
        assert args.dataset == "airport-frequencies"
        assert args.timeout == 300
        assert args.base_url == "https://davidmegginson.github.io/ourairports-data"
        assert args.data_dir is None
        assert args.pretty is False

    def test_serve_options(self):
        args = create_parser().parse_args(["-v", "serve", "--host", "0.0.0.0", "--port", "9000"])
        assert args.verbose is True
        assert args.host == "0.0.0.0"
        assert args.port == 9000

    def test_command_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])
