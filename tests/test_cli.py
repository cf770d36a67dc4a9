import pytest

from measurements import run


def run_cli(capsys: pytest.CaptureFixture[str], *args: str) -> str:
    """Run the command line with the given arguments and return its output."""
    run(list(args))
    return capsys.readouterr().out.strip()


def test_readable_units(capsys: pytest.CaptureFixture[str]):
    assert run_cli(capsys, "2500") == "2.5 kC"


def test_readable_units_with_precision(capsys: pytest.CaptureFixture[str]):
    assert run_cli(capsys, "0.0015", "-p", "2") == "1.50 mC"


def test_from_unit(capsys: pytest.CaptureFixture[str]):
    assert run_cli(capsys, "1", "--from", "abcoulombs") == "10.0 C"


def test_convert(capsys: pytest.CaptureFixture[str]):
    output = run_cli(capsys, "0.0002", "--to", "statcoulombs")
    assert float(output) == pytest.approx(599584.916)


def test_convert_between_units(capsys: pytest.CaptureFixture[str]):
    output = run_cli(capsys, "10000", "-f", "coulombs", "-t", "abcoulombs")
    assert float(output) == pytest.approx(1000.0)


def test_unknown_unit(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        run(["1", "--to", "furlongs"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_invalid_value():
    with pytest.raises(SystemExit):
        run(["many"])


def test_negative_precision(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        run(["1.0", "-p", "-1"])
    assert excinfo.value.code == 2
    assert "precision must be at least 0" in capsys.readouterr().err


def test_zero_precision(capsys: pytest.CaptureFixture[str]):
    assert run_cli(capsys, "2500", "-p", "0") == "2 kC"
