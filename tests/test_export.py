# tests/test_export.py

from datetime import date

import pandas as pd
import pytest

import ring_sundial as rs


@pytest.fixture
def layout():
    return rs.build_layout(rs.LayoutConfig())


def test_plot_layout_writes_svg(tmp_path, layout):
    path = rs.plot_layout(layout, outdir=str(tmp_path), prefix="ring", show_control_points=True)
    assert path == str(tmp_path / "ring.svg")
    text = (tmp_path / "ring.svg").read_text()
    assert text.lstrip().startswith("<?xml")
    assert "clipPath" in text


def test_fullscale_pdf(tmp_path, layout):
    path = rs.export_fullscale_pdf(layout, units="mm", outdir=str(tmp_path / "pdf"), margin=2.0)
    assert path.endswith("ring_sundial_fullscale.pdf")
    assert (tmp_path / "pdf" / "ring_sundial_fullscale.pdf").read_bytes()[:4] == b"%PDF"


def test_units_factor():
    assert rs._units_to_inch_factor("in") == 1.0
    assert rs._units_to_inch_factor("CM") == pytest.approx(1 / 2.54)
    with pytest.raises(rs.LayoutError, match="units"):
        rs._units_to_inch_factor("ft")


def test_export_tables(tmp_path, layout):
    paths = rs.export_tables(layout, str(tmp_path))
    assert sorted(p.rsplit("/", 1)[-1] for p in paths) == [
        "angle_gridlines.csv", "hour_curves.csv", "hour_tracks.csv", "month_gridlines.csv"]

    angles = pd.read_csv(tmp_path / "angle_gridlines.csv")
    assert list(angles["deg"]) == [45, 90, 135, 180, 225]

    months = pd.read_csv(tmp_path / "month_gridlines.csv")
    assert len(months) == 9
    assert months.loc[0, "date"] == "2025-12-21"
    assert months.loc[0, "month"] == 11
    assert months.loc[6, "daynum"] == 79

    tracks = pd.read_csv(tmp_path / "hour_tracks.csv")
    assert len(tracks) == 8 * 9
    assert tracks.groupby("hour_clock")["slope"].apply(lambda s: s.isna().sum()).eq(1).all()

    curves = pd.read_csv(tmp_path / "hour_curves.csv")
    assert len(curves) == 8 * 9


def test_config_from_args_defaults():
    args = rs.build_parser().parse_args([])
    config = rs.LayoutConfig.from_args(args)
    assert config.sample_hours == [5, 6, 7, 8, 9, 10, 11, 12]
    assert config.reference_dates == rs.DEFAULT_DATES
    assert config.reference_labels == rs.DEFAULT_LABELS
    assert (config.latitude, config.longitude) == (0.0, 0.0)


def test_config_from_args_custom_dates():
    args = rs.build_parser().parse_args([
        "--dates", "2025-03-20,2025-06-21,2025-09-22",
        "--hours-start", "8", "--hours-end", "10", "--hour-step", "0.5",
        "--lat", "-34.6",
    ])
    config = rs.LayoutConfig.from_args(args)
    assert config.reference_dates == [date(2025, 3, 20), date(2025, 6, 21), date(2025, 9, 22)]
    assert config.reference_labels == ["2025-03-20", "2025-06-21", "2025-09-22"]
    assert config.sample_hours == [8.0, 8.5, 9.0, 9.5, 10.0]
    assert config.latitude == -34.6


def test_parser_rejects_bad_dates():
    with pytest.raises(SystemExit):
        rs.build_parser().parse_args(["--dates", "2025-13-01"])


def test_main_writes_outputs(tmp_path, capsys):
    code = rs.main(["--outdir", str(tmp_path), "--csv", "--pdf", "--units", "cm"])
    assert code == 0
    assert (tmp_path / "ring_sundial.svg").exists()
    assert (tmp_path / "ring_sundial_fullscale.pdf").exists()
    assert (tmp_path / "hour_tracks.csv").exists()
    assert "SVG saved to" in capsys.readouterr().out


def test_main_reports_layout_errors(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        rs.main(["--outdir", str(tmp_path), "--dates", "2025-03-20,2025-06-21", "--labels", "one"])
    assert exc.value.code == 2
    assert "1 labels for 2" in capsys.readouterr().err
