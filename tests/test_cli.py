import pytest

from boschetch.cli import main


def test_default_sweep_reports_each_ash_time(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert sum(line.startswith("d_c:") for line in out) == 7
    assert sum(line.startswith("L_b:") for line in out) == 7
    assert out[0] == "0"
    assert out[6] == "1"


def test_full_width_has_no_taper(capsys):
    assert main(["--ash-times", "4.0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "x:   0" in out
    assert "N_t: 0" in out
    assert "L_t: -1.79769e+308" in out


def test_tapered_bottom_above_taper_start(capsys):
    assert main(["--ash-times", "1.5", "--etch-rate", "-1.0"]) == 0
    out = capsys.readouterr().out.splitlines()
    values = dict(line.split(":", 1) for line in out if ":" in line)
    taper_start = float(values["L_t"])
    bottom = float(values["L_b"])
    assert bottom < taper_start
    assert 0.0 < float(values["x"]) < 1.0


def test_invalid_dimension_exits():
    with pytest.raises(SystemExit):
        main(["--dimension", "4"])


def test_zero_mask_radius_fails(capsys):
    assert main(["--mask-radius", "0", "--ash-times", "1.5"]) == 1
    assert "error:" in capsys.readouterr().out