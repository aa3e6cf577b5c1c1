import pytest

from physsims.analytic import circle_motion, pendulum
from physsims.box import box1d_euler, box2d, minigolf
from physsims.cli import main


def _lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_circle_writes_table(tmp_path):
    out = tmp_path / "c.dat"
    status = main(["circle", "2", "0", "0", "1", "0", "3", "0.1", "-o", str(out)])
    assert status == 0
    lines = _lines(out)
    assert lines[0] == "Time(s) x(t) y(t) Vx(t) Vy(t)"
    assert len(lines) == len(circle_motion(2, 0, 0, 1, 0, 3, 0.1)) + 1
    assert lines[1].split()[:3] == ["0", "1", "0"]


def test_circle_invalid_radius_reports_error(tmp_path, capsys):
    out = tmp_path / "c.dat"
    status = main(["circle", "2", "0", "0", "-1", "0", "3", "0.1", "-o", str(out)])
    assert status == 1
    assert "Invalid radius" in capsys.readouterr().err
    assert not out.exists()


def test_lissajous_default_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["lissajous", "1", "2", "1", "0.25"]) == 0
    lines = _lines(tmp_path / "Lissajous.dat")
    assert lines[0] == "Time(s) x(t) y(t) Vx(t) Vy(t)"
    assert len(lines) == 6


def test_pendulum_has_angle_columns(tmp_path):
    out = tmp_path / "p.dat"
    assert main(["pendulum", "1", "0.1", "0", "2", "0.05", "-o", str(out)]) == 0
    lines = _lines(out)
    assert lines[0].split()[-2:] == ["theta(𝚯)", "dθ"]
    assert len(lines) == len(pendulum(1, 0.1, 0, 2, 0.05)) + 1
    assert all(len(line.split()) == 7 for line in lines[1:])


def test_box1d_euler_is_right_aligned(tmp_path):
    out = tmp_path / "b.dat"
    assert main(["box1d-euler", "1", "0.5", "1", "0", "2", "0.25", "-o", str(out)]) == 0
    lines = _lines(out)
    assert lines[0].split() == ["Time(s)", "x(t)", "v(t)"]
    assert lines[0].startswith(" ")
    assert len({len(line) for line in lines}) == 1
    assert len(lines) == len(box1d_euler(1, 0.5, 1, 0, 2, 0.25)) + 1


def test_box1d_rejects_start_outside(tmp_path, capsys):
    out = tmp_path / "b.dat"
    assert main(["box1d", "1", "2", "1", "0", "2", "0.25", "-o", str(out)]) == 1
    assert "x0 > L" in capsys.readouterr().err


def test_box2d_reports_bounces(tmp_path, capsys):
    out = tmp_path / "b2.dat"
    argv = ["box2d", "1", "1", "0.5", "0.5", "1", "0.75", "0.5", "5", "0.0625"]
    assert main(argv + ["-o", str(out)]) == 0
    result = box2d(1, 1, 0.5, 0.5, 1, 0.75, 0.5, 5, 0.0625)
    printed = capsys.readouterr().out
    assert f"Number of x bounces = {result.x_bounces}" in printed
    assert f"Number of y bounces = {result.y_bounces}" in printed
    lines = _lines(out)
    assert lines[0] == "Time(s), x(t), y(t), vx(t), vy(t)"
    assert len(lines) == len(result.samples) + 1


def test_minigolf_success(tmp_path, capsys):
    out = tmp_path / "g.dat"
    argv = ["minigolf", "10", "2", "5", "1", "0.5", "1", "0", "0.01", "-o", str(out)]
    assert main(argv) == 0
    assert "Result= Success nx= 0 ny= 0" in capsys.readouterr().out
    lines = _lines(out)
    assert lines[0] == "Time(s), x(t), y(t), Vx(t), Vy(t)"
    assert len(lines) == len(minigolf(10, 2, 5, 1, 0.5, 1, 0, 0.01).samples) + 1


def test_minigolf_bad_angle(tmp_path, capsys):
    out = tmp_path / "g.dat"
    argv = ["minigolf", "10", "2", "5", "1", "0.5", "1", "120", "0.01", "-o", str(out)]
    assert main(argv) == 1
    assert "theta > 90" in capsys.readouterr().err


def test_unknown_command_exits():
    with pytest.raises(SystemExit) as info:
        main(["orbit"])
    assert info.value.code == 2