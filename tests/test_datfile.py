import pytest

from physsims.datfile import format_number, write_table


def test_format_number_default_precision():
    assert format_number(1.0 / 3.0) == "0.333333"


def test_format_number_drops_trailing_zeros():
    assert format_number(0.5, 6) == "0.5"


def test_format_number_uses_exponent_for_large_values():
    assert format_number(123456789.0, 6) == "1.23457e+08"


@pytest.mark.parametrize("value", [0.1, 1.0 / 3.0, -2.718281828459045, 1e-300, 6.02e23])
def test_format_number_full_precision_round_trips(value):
    assert float(format_number(value, 17)) == value


def test_format_number_rejects_negative_precision():
    with pytest.raises(ValueError):
        format_number(1.0, -1)


def test_write_table_round_trip(tmp_path):
    path = tmp_path / "out.dat"
    rows = [(0.0, 1.5, -2.25), (0.25, 3.0, 4.125)]
    count = write_table(path, ["Time(s)", "x(t)", "y(t)"], rows)
    assert count == len(rows)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Time(s) x(t) y(t)"
    parsed = [tuple(float(v) for v in line.split(" ")) for line in lines[1:]]
    assert parsed == rows


def test_write_table_comma_separator(tmp_path):
    path = tmp_path / "out.dat"
    write_table(path, ["a", "b"], [(1.0, 2.0)], separator=", ", precision=17)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "a, b"
    assert [float(v) for v in lines[1].split(", ")] == [1.0, 2.0]


def test_write_table_width_pads_every_field(tmp_path):
    path = tmp_path / "out.dat"
    write_table(path, ["Time(s)", "x(t)"], [(0.5, 1.25), (1.0, 2.5)], width=17)
    for line in path.read_text(encoding="utf-8").splitlines():
        fields = line.split(" ")
        nonempty = [f for f in line.split(" ") if f]
        assert len(nonempty) == 2
        assert len(line) == 17 * 2 + 1
        assert fields[0] == ""


def test_write_table_empty_rows_writes_header_only(tmp_path):
    path = tmp_path / "out.dat"
    assert write_table(path, ["a", "b"], []) == 0
    assert path.read_text(encoding="utf-8") == "a b\n"


def test_write_table_rejects_wrong_row_length(tmp_path):
    with pytest.raises(ValueError):
        write_table(tmp_path / "out.dat", ["a", "b"], [(1.0,)])


def test_write_table_rejects_no_columns(tmp_path):
    with pytest.raises(ValueError):
        write_table(tmp_path / "out.dat", [], [])