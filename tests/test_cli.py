"""Tests for the cliforge command."""
import pytest

from mcp_config_compiler.cli import main
from mcp_config_compiler.compiler import FEATURES

TOPOLOGY = """
nodes:
  - id: r1
    name: R1
    vendor: Cisco
    type: Router
  - id: s1
    name: S1
    vendor: H3C
    config:
      vrrp:
        enabled: true
        interfaces:
          - interfaceName: Vlan-interface10
            groups:
              - {groupId: "1", virtualIp: 10.0.10.254}
"""


@pytest.fixture
def topology(tmp_path):
    path = tmp_path / "topology.yaml"
    path.write_text(TOPOLOGY)
    return str(path)


class TestCli:
    """Tests for cliforge subcommands."""

    def test_features(self, capsys):
        """'features' lists every feature name."""
        assert main(["features"]) == 0

        assert capsys.readouterr().out.splitlines() == FEATURES

    def test_compile_one(self, topology, capsys):
        """Compiling one device prints its script."""
        assert main(["--topology", topology, "compile", "--device", "r1"]) == 0

        assert capsys.readouterr().out.splitlines() == ["configure terminal", "hostname R1"]

    def test_compile_all_to_file(self, topology, tmp_path):
        """Compiling all devices writes headed scripts."""
        output = tmp_path / "out.cfg"

        assert main(["--topology", topology, "compile", "--output", str(output)]) == 0

        text = output.read_text()
        assert "# ===== R1 (Cisco) =====" in text
        assert "# ===== S1 (H3C) =====" in text

    def test_compile_unknown_device(self, topology, capsys):
        """Unknown devices exit 1 with a message on stderr."""
        assert main(["--topology", topology, "compile", "--device", "nope"]) == 1

        assert "Unknown device: nope" in capsys.readouterr().err

    def test_compile_by_vendor(self, topology, capsys):
        """--vendor compiles only that vendor's nodes."""
        assert main(["--topology", topology, "compile", "--vendor", "h3c"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[:2] == ["system-view", "sysname S1"]
        assert "hostname R1" not in lines

    def test_compile_vendor_without_nodes(self, topology, capsys):
        """A vendor with no nodes exits 1."""
        assert main(["--topology", topology, "compile", "--vendor", "Huawei"]) == 1

        assert "No Huawei devices in topology" in capsys.readouterr().err

    def test_missing_topology(self, tmp_path, capsys):
        """A missing topology file exits 1."""
        assert main(["--topology", str(tmp_path / "none.yaml"), "compile"]) == 1

        assert capsys.readouterr().err.startswith("Error:")

    def test_preview(self, topology, capsys):
        """Preview prints one feature."""
        assert main(["--topology", topology, "preview", "--device", "s1", "--feature", "VRRP"]) == 0

        assert " vrrp vrid 1 virtual-ip 10.0.10.254" in capsys.readouterr().out.splitlines()

    def test_preview_unknown_feature(self, topology, capsys):
        """Unknown features exit 1."""
        assert main(["--topology", topology, "preview", "--device", "s1", "--feature", "Teleport"]) == 1

        assert "Unknown feature" in capsys.readouterr().err

    def test_translate_line(self, capsys):
        """A line translates between dialects."""
        assert main(["translate", "--from", "h3c", "--to", "huawei", "dhcp server ip-pool POOL1"]) == 0

        assert capsys.readouterr().out.strip() == "ip pool POOL1"

    def test_translate_file(self, tmp_path, capsys):
        """A script file translates line by line."""
        script = tmp_path / "running.cfg"
        script.write_text("hostname CORE\n!\ninterface Port-channel2\n")

        assert main(["translate", "--from", "Cisco", "--to", "H3C", "--file", str(script)]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "sysname CORE",
            "!",
            "interface Bridge-Aggregation2",
        ]

    def test_translate_bad_vendor(self):
        """Unknown vendors are rejected by argparse."""
        with pytest.raises(SystemExit) as exc_info:
            main(["translate", "--from", "Juniper", "--to", "H3C", "x"])
        assert exc_info.value.code == 2

    def test_timings(self, topology, capsys):
        """--timings prints the per-operation summary to stderr."""
        assert main(["--topology", topology, "--timings", "compile", "--device", "r1"]) == 0

        err = capsys.readouterr().err
        assert "Performance Summary" in err
        assert "compile_device" in err
