from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_discrete.__main__ import main


def test_samples_are_printed_one_per_line(capsys):
    assert main(["BINOMIAL; 5, 0.2", "-n", "6", "--seed", "3"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert all(0 <= int(line) <= 5 for line in lines)


def test_seed_makes_output_reproducible(capsys):
    main(["POISSON; 2.5", "--count", "20", "--seed", "11"])
    first = capsys.readouterr().out
    main(["POISSON; 2.5", "--count", "20", "--seed", "11"])

    assert capsys.readouterr().out == first


def test_default_generator_seed(monkeypatch, capsys):
    monkeypatch.setenv("PYSATL_DISCRETE_SEED", "5")
    main(["UNIFORM; 0, 100", "-n", "10"])
    expected = capsys.readouterr().out

    main(["UNIFORM; 0, 100", "-n", "10", "--seed", "5"])

    assert capsys.readouterr().out == expected


def test_display(capsys):
    assert main(["UNIFORM; -1, 3", "--display"]) == 0

    assert capsys.readouterr().out == (
        " k      pmf        cdf   \n"
        "---  ---------  ---------\n"
        " -1   0.250000   0.250000\n"
        "  0   0.250000   0.500000\n"
        "  1   0.250000   0.750000\n"
        "  2   0.250000   1.000000\n"
    )


def test_zero_count(capsys):
    assert main(["OCCURRENCE; 0.2, 4", "-n", "0"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv",
    [["GEOMETRIC; 0.5"], ["BINOMIAL; 5, 2.0"], ["POISSON; 2.5", "-n", "-1"]],
    ids=["unknown_family", "invalid_parameter", "negative_count"],
)
def test_invalid_arguments(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 2
    assert "error:" in capsys.readouterr().err
