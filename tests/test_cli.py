"""Tests for the command-line entry point."""
import os
import re

import pytest
from stage1_sim import cli

REFERENCE_ARGS = ["10", "200", "220", "0", "10", "5", "1", "0.2"]
OUTPUT_PATTERN = re.compile(r"^altitude -?\d+\.\d{6} meters, vert speed -?\d+\.\d{6} m/s$")


def test_success_output_format(capsys):
    assert cli.main(REFERENCE_ARGS) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    assert OUTPUT_PATTERN.match(out[0])


def test_zero_burn_prints_pad_state(capsys):
    args = list(REFERENCE_ARGS)
    args[5] = "0"
    assert cli.main(args) == 0
    out = capsys.readouterr().out.strip()
    assert out == "altitude 70.000000 meters, vert speed 0.000000 m/s"


@pytest.mark.parametrize("argv", [[], REFERENCE_ARGS[:7], REFERENCE_ARGS + ["1"]])
def test_wrong_argument_count_exits_1(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage:" in captured.err


def test_malformed_number_exits_1(capsys):
    args = list(REFERENCE_ARGS)
    args[0] = "ten"
    assert cli.main(args) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "start_mass" in captured.err


def test_negative_values_are_positional(capsys):
    args = list(REFERENCE_ARGS)
    args[4] = "-1"
    assert cli.main(args) == 0


@pytest.mark.parametrize("text", ["-1e1", "-1E-2", "-.5e0"])
def test_negative_exponent_values_are_positional(text, capsys):
    args = list(REFERENCE_ARGS)
    args[4] = text
    assert cli.main(args) == 0
    assert OUTPUT_PATTERN.match(capsys.readouterr().out.strip())


def test_flags_may_precede_or_follow_parameters(tmp_path, capsys):
    csv_path = tmp_path / "log.csv"
    args = cli.parse_command_line(["--csv", str(csv_path)] + REFERENCE_ARGS[:4]
                                  + ["--strict"] + REFERENCE_ARGS[4:])
    assert args.csv == str(csv_path)
    assert args.strict is True
    assert args.lfo_per_sec == "10"
    assert args.drag_coeff == "0.2"


def test_one_second_burn_output(capsys):
    args = list(REFERENCE_ARGS)
    args[5] = "1"
    assert cli.main(args) == 0
    assert capsys.readouterr().out.strip() == \
        "altitude 75.434525 meters, vert speed 10.393396 m/s"


def test_strict_mode_reports_exhaustion(capsys):
    # 0.1 t burned at 10 LF units/s (111 kg/s) over 5 s
    args = ["0.1", "200", "220", "0", "10", "5", "1", "0.2", "--strict"]
    assert cli.main(args) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Validation failure" in captured.err


def test_csv_and_plots_written(tmp_path, capsys):
    csv_path = tmp_path / "log.csv"
    plot_dir = tmp_path / "plots"
    args = ["10", "200", "220", "0", "10", "0.5", "1", "0.2",
            "--csv", str(csv_path), "--plot-dir", str(plot_dir)]
    assert cli.main(args) == 0
    assert csv_path.exists()
    assert len(os.listdir(plot_dir)) >= 5


def test_parse_command_line_positional_order():
    names = [name for name, _ in cli.POSITIONAL_ARGS]
    assert names == ["start_mass", "thrust_asl", "thrust_vac", "solid_fuel_per_sec",
                     "lfo_per_sec", "burnout_time", "drag_area", "drag_coeff"]
    args = cli.parse_command_line(REFERENCE_ARGS)
    assert args.start_mass == "10"
    assert args.drag_coeff == "0.2"
