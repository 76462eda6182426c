"""
Tests for the command line interface.
"""

import json
import pytest
import sys
import os

import yaml

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dwarfregs.__main__ import ARCH_ENV_VAR, main, parse_number


@pytest.fixture(autouse=True)
def no_default_arch(monkeypatch):
    monkeypatch.delenv(ARCH_ENV_VAR, raising=False)


class TestNameCommand:
    """Tests for `dwarfregs name`."""

    def test_known_number(self, capsys):
        """Test printing a register name."""
        main(["name", "-a", "x86_64", "7"])
        assert capsys.readouterr().out == "rsp\n"

    def test_hex_number(self, capsys):
        """Test register numbers may be written in hex."""
        main(["name", "--arch", "riscv64", "0x1100"])
        assert capsys.readouterr().out == "sstatus\n"

    def test_unknown_number(self, capsys):
        """Test a missing number exits with status 1."""
        with pytest.raises(SystemExit) as exc:
            main(["name", "-a", "x86_64", "999"])
        assert exc.value.code == 1
        assert "Error: x86_64 has no register 999" in capsys.readouterr().err

    def test_invalid_number(self):
        """Test a non-numeric argument is a usage error."""
        with pytest.raises(SystemExit) as exc:
            main(["name", "-a", "arm", "pc"])
        assert exc.value.code == 2

    def test_arch_from_environment(self, capsys, monkeypatch):
        """Test the architecture defaults to the environment variable."""
        monkeypatch.setenv(ARCH_ENV_VAR, "arm")
        main(["name", "15"])
        assert capsys.readouterr().out == "R15\n"

    def test_missing_arch(self, capsys):
        """Test omitting the architecture is a usage error."""
        with pytest.raises(SystemExit) as exc:
            main(["name", "0"])
        assert exc.value.code == 2
        assert ARCH_ENV_VAR in capsys.readouterr().err

    def test_unknown_arch(self, capsys):
        """Test an unknown architecture exits with status 2."""
        with pytest.raises(SystemExit) as exc:
            main(["name", "-a", "sparc", "0"])
        assert exc.value.code == 2
        assert "Error: Unknown architecture: sparc" in capsys.readouterr().err


class TestNumberCommand:
    """Tests for `dwarfregs number`."""

    def test_known_name(self, capsys):
        """Test printing a register number."""
        main(["number", "-a", "riscv64", "x1/ra"])
        assert capsys.readouterr().out == "1\n"

    def test_unknown_name(self, capsys):
        """Test lookups stay case-sensitive on the command line."""
        with pytest.raises(SystemExit) as exc:
            main(["number", "-a", "arm", "r0"])
        assert exc.value.code == 1
        assert "no register named 'r0'" in capsys.readouterr().err


class TestListCommand:
    """Tests for `dwarfregs list`."""

    def test_text(self, capsys):
        """Test the text listing has a header and one line per register."""
        main(["list", "-a", "arm"])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("# arm:")
        assert len(lines) == 17
        assert lines[1].split() == ["0", "R0", "R0"]

    def test_json(self, capsys):
        """Test the JSON listing."""
        main(["list", "-a", "x86", "--format", "json"])
        document = json.loads(capsys.readouterr().out)
        assert document["architecture"] == "x86"
        assert document["registers"][-1] == {"number": 94, "name": "gs.base", "symbol": "GS_BASE"}

    def test_yaml(self, capsys):
        """Test the YAML listing keeps display strings intact."""
        main(["list", "-a", "riscv64", "-f", "yaml"])
        document = yaml.safe_load(capsys.readouterr().out)
        assert document["registers"][0] == {"number": 0, "name": "x0/zero", "symbol": "X0"}
        assert len(document["registers"]) == 254


class TestDumpCommand:
    """Tests for `dwarfregs dump`."""

    def test_dump_to_file(self, tmp_path):
        """Test dumping every catalog to a YAML file."""
        output = tmp_path / "registers.yaml"
        main(["dump", "-o", str(output)])
        document = yaml.safe_load(output.read_text())
        assert list(document) == ["arm", "x86", "x86_64", "riscv64"]
        assert document["x86_64"]["registers"][7]["name"] == "rsp"

    def test_dump_json_to_stdout(self, capsys):
        """Test dumping JSON without an output file."""
        main(["dump", "--format", "json"])
        document = json.loads(capsys.readouterr().out)
        assert len(document["arm"]["registers"]) == 16

    def test_json_ends_with_newline(self, capsys, tmp_path):
        """Test JSON output ends with a newline on stdout and in files."""
        main(["dump", "--format", "json"])
        assert capsys.readouterr().out.endswith("}\n")

        output = tmp_path / "registers.json"
        main(["dump", "-f", "json", "-o", str(output)])
        assert output.read_text().endswith("}\n")

        main(["list", "-a", "arm", "-f", "json"])
        assert capsys.readouterr().out.endswith("}\n")

    def test_dump_ignores_missing_arch(self, capsys):
        """Test dump does not need an architecture."""
        main(["dump"])
        assert "riscv64:" in capsys.readouterr().out


class TestParseNumber:
    """Tests for register number arguments."""

    def test_prefixes(self):
        """Test decimal and prefixed forms."""
        assert parse_number("7") == 7
        assert parse_number("0x1100") == 4352
        assert parse_number("0b11") == 3

    def test_negative_rejected(self):
        """Test negative numbers are rejected."""
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            parse_number("-1")


class TestVerbose:
    """Tests for `-v` logging."""

    def test_verbose_logs_catalog(self, capsys, caplog):
        """Test -v logs the catalog in use at DEBUG."""
        main(["-v", "name", "-a", "arm", "0"])
        assert capsys.readouterr().out == "R0\n"
        assert "RegisterCatalog(arm, 16 registers)" in caplog.text
        assert "IHI 0040B" in caplog.text

    def test_quiet_by_default(self, capsys, caplog):
        """Test nothing is logged without -v."""
        main(["name", "-a", "arm", "0"])
        assert capsys.readouterr().out == "R0\n"
        assert "RegisterCatalog" not in caplog.text
