"""Tests for the command-line front end."""

from __future__ import annotations

import pytest
import yaml

from gaugeshift.cli import _num, build_parser, main
from gaugeshift.config.settings import _DEFAULTS_PATH

_SAME_GAUGE = ["--personal", "20x28", "--pattern", "20x28"]


class TestSizeCommand:
    def test_recommends_size(self, capsys):
        code = main(
            [
                "size",
                "--personal", "22",
                "--pattern", "20",
                "--desired", "100",
                "--size", "S=90",
                "--size", "M=100",
                "--size", "L=110",
            ]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("Knit size L")
        assert "tighter than the pattern (10% more stitches per 10cm)" in out
        assert "approximately 100cm, which is very close to your target!" in out
        assert "  S: 90cm → 81.8cm (-18.2cm)" in out
        assert "  L ✓: 110cm → 100cm (0cm)" in out

    def test_smaller_than_target(self, capsys):
        main(["size", "--personal", "20", "--pattern", "20", "--desired", "100", "--size", "A=97"])
        out = capsys.readouterr().out
        assert "which is 3cm smaller than your target." in out
        assert "matches the pattern gauge closely" in out

    def test_bad_size_argument(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["size", "--personal", "22", "--pattern", "20", "--desired", "100", "--size", "M"])
        assert excinfo.value.code == 2

    @pytest.mark.parametrize("desired", ["nan", "inf"])
    def test_non_finite_desired_rejected(self, desired, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["size", "--personal", "22", "--pattern", "20", "--desired", desired, "--size", "M=96"])
        assert excinfo.value.code == 2
        assert "is not a number" in capsys.readouterr().err

    def test_large_measurement_keeps_decimals(self, capsys):
        main(
            [
                "size", "--personal", "20", "--pattern", "20",
                "--desired", "123456.7", "--size", "A=123456.7",
            ]
        )
        out = capsys.readouterr().out
        assert "approximately 123456.7cm" in out
        assert "  A ✓: 123456.7cm → 123456.7cm (0cm)" in out


class TestPickupCommand:
    def test_prints_repeat(self, capsys):
        code = main(
            ["pickup", *_SAME_GAUGE, "--stitches", "3", "--rows", "4", "--total-rows", "40"]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "Pick up 30 stitches over 40 rows" in out
        assert "pick up 1 × 2 rows → skip 1 → pick up 1" in out
        assert "Repeat this 10 times" in out
        assert "One repeat (4 rows):" in out
        assert "● ● ○ ●" in out
        assert "(Pattern says 3 per 4 rows → adjusted for your gauge)" in out

    def test_overflow_reported_as_error(self, capsys):
        code = main(
            ["pickup", *_SAME_GAUGE, "--stitches", "1", "--rows", "1", "--total-rows", "10"]
        )
        captured = capsys.readouterr()
        assert code == 2
        assert captured.out == ""
        assert captured.err.startswith("error: The calculated pick-up count exceeds")

    def test_allow_overflow_flag(self, capsys):
        code = main(
            [
                "pickup", *_SAME_GAUGE,
                "--stitches", "1", "--rows", "1", "--total-rows", "10",
                "--allow-overflow",
            ]
        )
        assert code == 0
        assert "Pick up 1 from each of 1 row" in capsys.readouterr().out

    def test_bad_gauge_argument(self):
        with pytest.raises(SystemExit) as excinfo:
            main(
                [
                    "pickup", "--personal", "0x28", "--pattern", "20x28",
                    "--stitches", "3", "--rows", "4", "--total-rows", "40",
                ]
            )
        assert excinfo.value.code == 2

    @pytest.mark.parametrize("gauge", ["nanx28", "20xinf"])
    def test_non_finite_gauge_rejected(self, gauge):
        with pytest.raises(SystemExit) as excinfo:
            main(
                [
                    "pickup", "--personal", gauge, "--pattern", "20x28",
                    "--stitches", "3", "--rows", "4", "--total-rows", "40",
                ]
            )
        assert excinfo.value.code == 2

    def test_config_file(self, tmp_path, capsys):
        data = yaml.safe_load(_DEFAULTS_PATH.read_text(encoding="utf-8"))
        data["rendering"]["separator"] = ", then "
        data["pickup"]["allow_overflow"] = True
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")

        code = main(
            [
                "--config", str(path),
                "pickup", *_SAME_GAUGE, "--stitches", "3", "--rows", "4", "--total-rows", "40",
            ]
        )
        assert code == 0
        assert "pick up 1 × 2 rows, then skip 1, then pick up 1" in capsys.readouterr().out


class TestBorderCommand:
    def test_stitch_edge(self, capsys):
        code = main(
            ["border", "--main", "20x28", "--border", "24x32", "--count", "100", "--edge", "stitch"]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "Pick up 120 border stitches along 100 stitches (6 for every 5 stitches)" in out
        assert "Edge length: 50.0cm" in out
        assert "Pattern to repeat:" not in out

    def test_row_edge_includes_repeat(self, capsys):
        main(["border", "--main", "20x28", "--border", "24x32", "--count", "100", "--edge", "row"])
        out = capsys.readouterr().out
        assert "Pick up 86 stitches over 100 rows" in out
        assert "Repeat this 2 times" in out

    def test_row_edge_explains_missing_plan(self, capsys):
        code = main(
            ["border", "--main", "20x20", "--border", "30x40", "--count", "40", "--edge", "row"]
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "Pick up 60 border stitches along 40 rows" in out
        assert "more than one stitch per row, which isn't possible for vertical edges." in out
        assert "Pattern to repeat:" not in out

    def test_equal_counts_explained(self, capsys):
        main(["border", "--main", "20x20", "--border", "20x30", "--count", "40", "--edge", "row"])
        out = capsys.readouterr().out
        assert "Pick up 40 border stitches along 40 rows" in out
        assert "The calculated pick-up count exceeds your row count." in out

    def test_stitch_edge_has_no_note(self, capsys):
        main(["border", "--main", "20x20", "--border", "30x40", "--count", "40", "--edge", "stitch"])
        assert "vertical edges" not in capsys.readouterr().out


class TestConfigErrors:
    _PICKUP = ["pickup", *_SAME_GAUGE, "--stitches", "3", "--rows", "4", "--total-rows", "40"]

    def test_missing_file(self, tmp_path, capsys):
        code = main(["--config", str(tmp_path / "nope.yaml"), *self._PICKUP])
        captured = capsys.readouterr()
        assert code == 2
        assert captured.out == ""
        assert captured.err.startswith("error: Settings file not found")

    def test_malformed_file(self, tmp_path, capsys):
        path = tmp_path / "settings.yaml"
        path.write_text("pickup: [unclosed\n", encoding="utf-8")
        code = main(["--config", str(path), *self._PICKUP])
        captured = capsys.readouterr()
        assert code == 2
        assert "Failed to parse" in captured.err

    def test_invalid_values(self, tmp_path, capsys):
        data = yaml.safe_load(_DEFAULTS_PATH.read_text(encoding="utf-8"))
        del data["display"]
        path = tmp_path / "settings.yaml"
        path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
        code = main(["--config", str(path), *self._PICKUP])
        assert code == 2
        assert "section 'display' is missing" in capsys.readouterr().err


class TestNumberFormatting:
    def test_keeps_all_integer_digits(self):
        assert _num(123456.7) == "123456.7"

    def test_drops_trailing_zeros(self):
        assert _num(100.0) == "100"
        assert _num(96.5) == "96.5"

    def test_rounds_to_decimals(self):
        assert _num(81.818, 1) == "81.8"
        assert _num(81.818, 2) == "81.82"

    def test_no_negative_zero(self):
        assert _num(-0.0) == "0"
        assert _num(-0.04) == "0"


class TestParser:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
