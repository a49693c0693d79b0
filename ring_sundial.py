#!/usr/bin/env python3
"""
Ring Sundial Designer: unrolled template for a tube (ring) dial
Computes the flattened layout of a ring sundial: angle gridlines, solstice/equinox
columns and one analemma-like hour curve per clock hour, then exports SVG, a
full-scale PDF and CSV tables.

Usage examples:
  python ring_sundial.py --diameter 18.5 --width 12 --outdir ./out
  python ring_sundial.py --diameter 60 --width 25 --units mm --pdf --csv \
      --hours-start 6 --hours-end 12 --hour-step 0.5 --lat -34.6 --lon -58.4

Notes:
- The ring is cut along its length and flattened: x runs across the ring width
  (one column per reference date), y is the arc length along the circumference.
- The Sun's altitude is mapped onto the ring as twice its angle, measured from the
  origin angle (45 degrees below the hole) to spread the curves over the band.
- Latitude and longitude default to 0, which makes altitude a function of date and
  clock hour only.
"""
import argparse
import logging
import math
import os
import sys
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch, Rectangle as MplRectangle
from matplotlib.path import Path

logger = logging.getLogger(__name__)


EARTH_TILT = 23.439281          # degrees
ANGLES = [45, 90, 135, 180, 225]  # ring angles of the gridlines, top to bottom
MASK_MARGIN_LEFT = 5.0
MASK_MARGIN_RIGHT = 20.0

DEFAULT_DIAMETER = 18.5
DEFAULT_WIDTH = 12.0
DEFAULT_ORIGIN_DEG = 45.0
HOLE_DEG = 45.0         # hole sits this far before the end of the circumference
DEFAULT_HOURS = [5, 6, 7, 8, 9, 10, 11, 12]

# Southern hemisphere naming: the December solstice is the summer one.
DEFAULT_DATES = [
    date(2025, 12, 21),
    date(2025, 10, 15),
    date(2025, 9, 22),
    date(2025, 7, 15),
    date(2025, 6, 21),
    date(2025, 4, 15),
    date(2025, 3, 20),
    date(2025, 2, 15),
    date(2025, 12, 21),
]
DEFAULT_LABELS = [
    "Summer Solstice", "",
    "Vernal Equinox", "",
    "Winter Solstice", "",
    "Autumn Equinox", "",
    "Summer Solstice",
]


class LayoutError(ValueError):
    """Raised when the inputs of a layout break one of its preconditions."""


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the module logger with a single stdout handler."""
    log = logging.getLogger(__name__)
    log.setLevel(level)
    if log.hasHandlers():
        log.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    log.addHandler(handler)


# -----------------------------
# Solar model
# -----------------------------

def _as_date(d) -> date:
    if isinstance(d, datetime):
        return d.date()
    return d


def day_of_year(d: date) -> int:
    # Jan 1 = 1
    d = _as_date(d)
    return (d - date(d.year, 1, 1)).days + 1


def month_offset(d: date) -> int:
    """Whole months elapsed since January 1st of the date's year (January = 0)."""
    return _as_date(d).month - 1


def declination(d: date) -> float:
    """Solar declination in degrees (Cooper's approximation)."""
    N = day_of_year(d)
    return EARTH_TILT * math.sin(math.radians(360.0 * (N + 284) / 365.0))


def equation_of_time_minutes(d: date) -> float:
    """
    Equation of time in minutes, positive when the sundial is ahead of the clock.
    Rounded to two decimals; downstream values depend on that rounding.
    """
    N = day_of_year(d)
    B = math.radians(360.0 * (N - 81) / 365.0)
    eot = 9.87 * math.sin(2 * B) - 7.53 * math.cos(B) - 1.5 * math.sin(B)
    return round(eot, 2)


def standard_meridian(lon_deg: float) -> float:
    """Nearest time-zone center meridian (multiple of 15 degrees)."""
    # half rounds up, towards the east
    return 15 * math.floor(lon_deg / 15 + 0.5)


def apparent_solar_time_hours(d: date, clock_hour: float, lon_deg: float) -> float:
    # 4 minutes of time per degree of longitude
    ast_min = clock_hour * 60 + 4 * (standard_meridian(lon_deg) - lon_deg) + equation_of_time_minutes(d)
    return ast_min / 60.0


def hour_angle(ast_hours: float) -> float:
    """Hour angle in degrees: 0 at solar noon, 15 degrees per hour (+ afternoon)."""
    return ((ast_hours * 60) - 720) / 4


def altitude(d: date, clock_hour: float, latitude_deg: float = 0.0, longitude_deg: float = 0.0) -> float:
    """
    Sun altitude above the horizon in degrees for a local clock hour.
    sin(h) = sin(phi) sin(dec) + cos(phi) cos(dec) cos(H)
    """
    if not -90.0 <= latitude_deg <= 90.0:
        raise LayoutError(f"latitude must lie within [-90, 90], got {latitude_deg}")

    ast = apparent_solar_time_hours(d, clock_hour, longitude_deg)
    H = math.radians(hour_angle(ast))
    dec = math.radians(declination(d))
    phi = math.radians(latitude_deg)

    s = math.sin(phi) * math.sin(dec) + math.cos(phi) * math.cos(dec) * math.cos(H)
    return math.degrees(math.asin(max(-1.0, min(1.0, s))))


def arc_length(angle_deg: float, radius: float) -> float:
    return radius * math.radians(angle_deg)


# -----------------------------
# Ring geometry
# -----------------------------

def _check_positive(name: str, value: float) -> None:
    if not value > 0:
        raise LayoutError(f"{name} must be positive, got {value}")


@dataclass(frozen=True)
class RingGeometry:
    """Tube ring: `width` across the ring, `diameter` of the tube."""
    width: float
    diameter: float

    def __post_init__(self):
        _check_positive("ring width", self.width)
        _check_positive("ring diameter", self.diameter)

    @property
    def radius(self) -> float:
        return self.diameter / 2

    @property
    def circumference(self) -> float:
        # total length of the unrolled strip
        return self.diameter * math.pi


@dataclass(frozen=True)
class AnglePoint:
    x0: float
    y0: float
    x1: float
    y1: float
    deg: float


@dataclass(frozen=True)
class MonthLine:
    x0: float
    y0: float
    x1: float
    y1: float
    label: str


@dataclass(frozen=True)
class Rectangle:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def contains(self, x: float, y: float) -> bool:
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1


@dataclass(frozen=True)
class HourTrack:
    """Points of one clock hour across the reference dates, one row per date (read-only)."""
    hour: float
    XY: np.ndarray

    def __post_init__(self):
        XY = np.array(self.XY, dtype=float)
        XY.flags.writeable = False
        object.__setattr__(self, "XY", XY)

    def __len__(self) -> int:
        return self.XY.shape[0]

    @property
    def x(self) -> np.ndarray:
        return self.XY[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self.XY[:, 1]


@dataclass(frozen=True)
class DialLayout:
    angle_gridlines: List[AnglePoint]
    month_gridlines: List[MonthLine]
    hour_tracks: List[HourTrack]
    hour_curves: List[np.ndarray]
    dial_mask_region: Rectangle
    outline: Rectangle
    hole: Tuple[float, float]
    reference_dates: List[date] = field(default_factory=list)


# -----------------------------
# Ring projection
# -----------------------------

def _column_step(dates: Sequence[date], width: float) -> float:
    if len(dates) < 2:
        raise LayoutError(f"at least two reference dates are needed to space columns, got {len(dates)}")
    return width / (len(dates) - 1)


def build_angle_gridlines(diameter: float, width: float) -> List[AnglePoint]:
    _check_positive("diameter", diameter)
    _check_positive("width", width)
    radius = diameter / 2
    lines = []
    for a in ANGLES:
        y = arc_length(a, radius)
        lines.append(AnglePoint(x0=0.0, y0=y, x1=width, y1=y, deg=a))
    return lines


def build_month_gridlines(dates: Sequence[date],
                          width: float,
                          top_arc: float,
                          bottom_arc: float,
                          labels: Sequence[str]) -> List[MonthLine]:
    _check_positive("width", width)
    lx = _column_step(dates, width)
    if len(labels) != len(dates):
        raise LayoutError(f"got {len(labels)} labels for {len(dates)} reference dates")

    return [MonthLine(x0=lx * i, y0=top_arc, x1=lx * i, y1=bottom_arc, label=labels[i])
            for i in range(len(dates))]


def build_hour_tracks(dates: Sequence[date],
                      width: float,
                      hours: Sequence[float],
                      origin_deg: float,
                      radius: float,
                      latitude_deg: float = 0.0,
                      longitude_deg: float = 0.0) -> List[HourTrack]:
    """
    One track per clock hour. Column i sits at x = i * step; y is the origin arc plus
    the arc of twice the Sun's altitude on dates[i] at that hour.
    """
    _check_positive("width", width)
    _check_positive("radius", radius)
    lx = _column_step(dates, width)
    if len(hours) == 0:
        raise LayoutError("at least one sample hour is needed")

    o = arc_length(origin_deg, radius)
    tracks = []
    for h in hours:
        XY = np.array([
            (lx * i, o + arc_length(altitude(d, h, latitude_deg, longitude_deg) * 2, radius))
            for i, d in enumerate(dates)
        ], dtype=float)
        tracks.append(HourTrack(hour=h, XY=XY))
    return tracks


def _track_points(track) -> np.ndarray:
    XY = track.XY if isinstance(track, HourTrack) else np.asarray(track, dtype=float)
    if XY.ndim != 2 or XY.shape[1] != 2 or XY.shape[0] < 2:
        raise LayoutError(f"a curve needs at least two (x, y) points, got shape {XY.shape}")
    return XY


def fit_quadratic_curve(track) -> np.ndarray:
    """
    Points of the smoothed curve through a track: the first point, the midpoint of
    every interior point and its successor, and the last point.

    Rendered as quadratic segments, each interior sample is the control point of a
    segment that ends on the following midpoint, so the curve rounds every corner
    and stays anchored at both ends.
    """
    XY = _track_points(track)
    mids = (XY[1:-1] + XY[2:]) / 2
    return np.vstack([XY[:1], mids, XY[-1:]])


def quadratic_path(track) -> Path:
    """Matplotlib path of quadratic segments through a track (see fit_quadratic_curve)."""
    XY = _track_points(track)
    curve = fit_quadratic_curve(XY)

    vertices = [XY[0]]
    codes = [Path.MOVETO]
    for i in range(1, len(XY) - 1):
        vertices += [XY[i], curve[i]]
        codes += [Path.CURVE3, Path.CURVE3]
    # last segment collapses onto the end point
    vertices += [XY[-1], XY[-1]]
    codes += [Path.CURVE3, Path.CURVE3]
    return Path(np.array(vertices), codes)


def segment_slopes(track) -> np.ndarray:
    XY = _track_points(track)
    d = np.diff(XY, axis=0)
    return d[:, 1] / d[:, 0]


def build_dial_mask_region(width: float, radius: float) -> Rectangle:
    _check_positive("width", width)
    _check_positive("radius", radius)
    return Rectangle(x0=-MASK_MARGIN_LEFT,
                     y0=arc_length(ANGLES[0], radius),
                     x1=width + MASK_MARGIN_RIGHT,
                     y1=arc_length(ANGLES[-1], radius))


def build_outline(width: float, diameter: float) -> Rectangle:
    return Rectangle(x0=0.0, y0=0.0, x1=width, y1=diameter * math.pi)


def hole_position(width: float, radius: float, deg: float = HOLE_DEG) -> Tuple[float, float]:
    """Gnomon hole, `deg` degrees before the end of the circumference."""
    return width / 2, arc_length(360 - deg, radius)


# -----------------------------
# Layout configuration
# -----------------------------

@dataclass
class LayoutConfig:
    ring_width: float = DEFAULT_WIDTH
    ring_diameter: float = DEFAULT_DIAMETER
    reference_dates: List[date] = field(default_factory=lambda: list(DEFAULT_DATES))
    reference_labels: List[str] = field(default_factory=lambda: list(DEFAULT_LABELS))
    sample_hours: List[float] = field(default_factory=lambda: list(DEFAULT_HOURS))
    latitude: float = 0.0
    longitude: float = 0.0
    origin_deg: float = DEFAULT_ORIGIN_DEG

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "LayoutConfig":
        step = args.hour_step
        if step <= 0:
            raise LayoutError(f"hour step must be positive, got {step}")
        num = int(round((args.hours_end - args.hours_start) / step)) + 1
        hours = [args.hours_start + i * step for i in range(num)]

        if args.dates is None:
            dates = list(DEFAULT_DATES)
            labels = list(DEFAULT_LABELS) if args.labels is None else args.labels
        else:
            dates = args.dates
            labels = [d.isoformat() for d in dates] if args.labels is None else args.labels

        return cls(ring_width=args.width,
                   ring_diameter=args.diameter,
                   reference_dates=dates,
                   reference_labels=labels,
                   sample_hours=hours,
                   latitude=args.lat,
                   longitude=args.lon,
                   origin_deg=args.origin_deg)


def build_layout(config: LayoutConfig) -> DialLayout:
    ring = RingGeometry(width=config.ring_width, diameter=config.ring_diameter)

    angles = build_angle_gridlines(ring.diameter, ring.width)
    top_arc, bottom_arc = angles[0].y0, angles[-1].y0
    months = build_month_gridlines(config.reference_dates, ring.width,
                                   top_arc, bottom_arc, config.reference_labels)
    tracks = build_hour_tracks(config.reference_dates, ring.width, config.sample_hours,
                               config.origin_deg, ring.radius,
                               latitude_deg=config.latitude,
                               longitude_deg=config.longitude)
    curves = [fit_quadratic_curve(t) for t in tracks]
    for c in curves:
        c.flags.writeable = False
    mask = build_dial_mask_region(ring.width, ring.radius)

    logger.debug("ring %.3f x %.3f: %d dates, %d hour tracks, band y=[%.3f, %.3f]",
                 ring.width, ring.diameter, len(config.reference_dates), len(tracks),
                 mask.y0, mask.y1)

    return DialLayout(angle_gridlines=angles,
                      month_gridlines=months,
                      hour_tracks=tracks,
                      hour_curves=curves,
                      dial_mask_region=mask,
                      outline=build_outline(ring.width, ring.diameter),
                      hole=hole_position(ring.width, ring.radius),
                      reference_dates=list(config.reference_dates))


# -----------------------------
# Plotting and export
# -----------------------------

PX_PER_INCH = 72.0


def _units_to_inch_factor(units: str) -> float:
    units = units.lower()
    if units == "mm":
        return 1.0 / 25.4
    if units == "cm":
        return 1.0 / 2.54
    if units in ("in", "inch", "inches"):
        return 1.0
    raise LayoutError("units must be one of: mm, cm, in")


def _extent(layout: DialLayout, margin: float = 1.0) -> Tuple[float, float, float, float]:
    o, m = layout.outline, layout.dial_mask_region
    return (min(o.x0, m.x0) - margin, max(o.x1, m.x1) + margin,
            min(o.y0, m.y0) - margin, max(o.y1, m.y1) + margin)


def _draw_layout(ax, layout: DialLayout, label_offset: float, show_control_points: bool = False):
    """Draw every primitive with its own style; only dots and curves are clipped."""
    o = layout.outline
    ax.plot([o.x0, o.x1, o.x1, o.x0, o.x0],
            [o.y0, o.y0, o.y1, o.y1, o.y0],
            color="#000000", linewidth=0.8)

    for a in layout.angle_gridlines:
        ax.plot([a.x0, a.x1], [a.y0, a.y1], color="#000000", linewidth=0.8)
        ax.text(a.x0 - 2 * label_offset, a.y0, f"{a.deg:g}", fontsize=7, ha='right', va='center')

    for i, ml in enumerate(layout.month_gridlines):
        ax.plot([ml.x0, ml.x1], [ml.y0, ml.y1],
                color='#0099ff' if i % 2 == 0 else '#dfdfdf', linewidth=0.8)
        if ml.label:
            ax.text(ml.x1, ml.y1 + label_offset, ml.label, fontsize=7, color='#0099ff',
                    rotation=90, ha='center', va='top')

    hx, hy = layout.hole
    ax.plot([hx], [hy], marker='o', markersize=5, color='gold', linestyle='none')

    m = layout.dial_mask_region
    clip = MplRectangle((m.x0, m.y0), m.width, m.height, transform=ax.transData)

    for track, curve in zip(layout.hour_tracks, layout.hour_curves):
        patch = PathPatch(quadratic_path(track), facecolor='none', edgecolor='blue', linewidth=1)
        ax.add_patch(patch)
        patch.set_clip_path(clip)

        dots, = ax.plot(track.x, track.y, marker='o', markersize=5, color='tomato', linestyle='none')
        dots.set_clip_path(clip)

        if show_control_points:
            ctrl, = ax.plot(curve[1:-1, 0], curve[1:-1, 1], marker='o', markersize=3,
                            color='green', linestyle='none')
            ctrl.set_clip_path(clip)

        x_last, y_last = track.XY[-1]
        t = ax.text(x_last + label_offset, y_last, f"{track.hour:g}", fontsize=7, ha='left', va='center',
                    clip_on=True)
        t.set_clip_path(clip)


def plot_layout(layout: DialLayout,
                outdir: str,
                prefix: str = "ring_sundial",
                factor: float = 16.0,
                show_control_points: bool = False) -> str:
    """
    Render the layout to SVG at `factor` pixels per length unit.
    y grows downward, as on the cut-open ring read from the hole side.
    """
    os.makedirs(outdir, exist_ok=True)
    xmin, xmax, ymin, ymax = _extent(layout)
    fig, ax = plt.subplots(figsize=((xmax - xmin) * factor / PX_PER_INCH,
                                    (ymax - ymin) * factor / PX_PER_INCH))

    _draw_layout(ax, layout, label_offset=10.0 / factor, show_control_points=show_control_points)

    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymax, ymin)
    ax.set_aspect('equal', adjustable='box')
    ax.set_axis_off()

    svg_path = os.path.join(outdir, f"{prefix}.svg")
    fig.savefig(svg_path, format="svg", bbox_inches="tight")
    plt.close(fig)
    return svg_path


def export_fullscale_pdf(layout: DialLayout,
                         units: str,
                         outdir: str,
                         prefix: str = "ring_sundial_fullscale",
                         margin: float = 0.0) -> str:
    """
    Create a 1:1 scale PDF for printing and wrapping around the ring.
    Coordinates are in the given units.
    """
    os.makedirs(outdir, exist_ok=True)
    inch_factor = _units_to_inch_factor(units)

    xmin, xmax, ymin, ymax = _extent(layout, margin=margin)
    fig_w_in = (xmax - xmin) * inch_factor
    fig_h_in = (ymax - ymin) * inch_factor
    fig = plt.figure(figsize=(fig_w_in, fig_h_in))
    # axes fill the page so one unit on paper is one unit of the ring
    ax = fig.add_axes((0, 0, 1, 1))

    _draw_layout(ax, layout, label_offset=0.02 * layout.outline.width)

    ax.set_xlim(xmin, xmax)
    ax.set_ylim(ymax, ymin)
    ax.set_axis_off()

    pdf_path = os.path.join(outdir, f"{prefix}.pdf")
    fig.savefig(pdf_path, format="pdf")
    plt.close(fig)
    return pdf_path


def export_tables(layout: DialLayout, outdir: str) -> List[str]:
    os.makedirs(outdir, exist_ok=True)
    paths = []

    def _write(df: pd.DataFrame, name: str):
        path = os.path.join(outdir, name)
        df.to_csv(path, index=False)
        paths.append(path)

    _write(pd.DataFrame([{
        "deg": a.deg, "x0": a.x0, "y0": a.y0, "x1": a.x1, "y1": a.y1
    } for a in layout.angle_gridlines]), "angle_gridlines.csv")

    rows = []
    for i, ml in enumerate(layout.month_gridlines):
        row = {"column": i, "label": ml.label, "x0": ml.x0, "y0": ml.y0, "x1": ml.x1, "y1": ml.y1}
        if i < len(layout.reference_dates):
            d = layout.reference_dates[i]
            row.update({"date": d.isoformat(), "daynum": day_of_year(d), "month": month_offset(d)})
        rows.append(row)
    _write(pd.DataFrame(rows), "month_gridlines.csv")

    rows = []
    for track in layout.hour_tracks:
        # slope of the segment leaving each point; none after the last one
        slopes = np.append(segment_slopes(track), math.nan)
        for i, ((x, y), k) in enumerate(zip(track.XY, slopes)):
            rows.append({"hour_clock": track.hour, "column": i, "x": x, "y": y, "slope": k})
    _write(pd.DataFrame(rows), "hour_tracks.csv")

    rows = []
    for track, curve in zip(layout.hour_tracks, layout.hour_curves):
        for i, (x, y) in enumerate(curve):
            rows.append({"hour_clock": track.hour, "index": i, "x": x, "y": y})
    _write(pd.DataFrame(rows), "hour_curves.csv")

    return paths


# -----------------------------
# CLI
# -----------------------------

def _date_list(text: str) -> List[date]:
    try:
        return [date.fromisoformat(s.strip()) for s in text.split(",") if s.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"dates must be comma separated YYYY-MM-DD: {e}")


def _label_list(text: str) -> List[str]:
    return [s.strip() for s in text.split(",")]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Ring (tube) sundial template designer with full-scale PDF & CSV export.")
    p.add_argument("--diameter", type=float, default=DEFAULT_DIAMETER, help="Tube diameter in chosen units (default 18.5).")
    p.add_argument("--width", type=float, default=DEFAULT_WIDTH, help="Ring width in chosen units (default 12).")
    p.add_argument("--dates", type=_date_list, default=None,
                   help="Comma separated reference dates (YYYY-MM-DD), one column each, left to right.")
    p.add_argument("--labels", type=_label_list, default=None,
                   help="Comma separated column labels, one per date (empty entries allowed).")
    p.add_argument("--hours-start", type=float, default=5.0, help="First clock hour (default 5).")
    p.add_argument("--hours-end", type=float, default=12.0, help="Last clock hour (default 12).")
    p.add_argument("--hour-step", type=float, default=1.0, help="Clock hour step (default 1).")
    p.add_argument("--lat", type=float, default=0.0, help="Latitude in degrees (+N, default 0).")
    p.add_argument("--lon", type=float, default=0.0, help="Longitude in degrees (East positive, default 0).")
    p.add_argument("--origin-deg", type=float, default=DEFAULT_ORIGIN_DEG,
                   help="Ring angle of zero altitude, measured from the hole (default 45).")
    p.add_argument("--factor", type=float, default=16.0, help="SVG scale in pixels per unit (default 16).")
    p.add_argument("--outdir", type=str, default=".", help="Output directory (default current).")
    p.add_argument("--prefix", type=str, default="ring_sundial", help="Output filename prefix for SVG/PDF.")
    p.add_argument("--show-control-points", action="store_true", help="Mark the curve midpoints.")
    # Full-scale PDF options
    p.add_argument("--pdf", action="store_true", help="Export full-scale PDF.")
    p.add_argument("--units", type=str, default="mm", choices=["mm", "cm", "in"], help="Units for geometry and PDF scaling.")
    p.add_argument("--margin", type=float, default=0.0, help="Extra margin around the template in units.")
    # Tables
    p.add_argument("--csv", action="store_true", help="Write gridlines and hour tracks as CSV tables.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = LayoutConfig.from_args(args)
        layout = build_layout(config)
    except LayoutError as e:
        parser.error(str(e))

    svg_path = plot_layout(layout, outdir=args.outdir, prefix=args.prefix,
                           factor=args.factor, show_control_points=args.show_control_points)
    print(f"SVG saved to: {svg_path}")

    if args.csv:
        export_tables(layout, args.outdir)
        print(f"Gridline and hour track CSV files written in: {args.outdir}")

    if args.pdf:
        pdf_path = export_fullscale_pdf(layout, units=args.units, outdir=args.outdir,
                                        prefix=f"{args.prefix}_fullscale", margin=args.margin)
        print(f"Full-scale PDF saved to: {pdf_path}")
        print("NOTE: The PDF is 1:1 in the chosen units. Make sure to print at 100% scale (no 'fit to page').")
        print(f"Ring circumference ≈ {layout.outline.height:.2f} {args.units}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
