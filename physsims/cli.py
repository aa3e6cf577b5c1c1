"""Command line front end that runs a simulation and writes its data table."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable, Sequence

from .analytic import (
    Sample,
    circle_motion,
    lissajous,
    pendulum,
    projectile,
    projectile_air_resistance,
)
from .box import box1d, box1d_euler, box2d, minigolf
from .datfile import format_number as _g
from .datfile import write_table

_MOTION_COLUMNS = ("Time(s)", "x(t)", "y(t)", "Vx(t)", "Vy(t)")


def _rows(samples: Iterable[Sample]) -> Iterable[tuple[float, ...]]:
    return ((s.t, s.x, s.y, s.vx, s.vy) for s in samples)


def _circle(args: argparse.Namespace) -> None:
    print(f"Omega = {_g(args.omega)}")
    print(f"Center: ({_g(args.x0)}, {_g(args.y0)})  Radius = {_g(args.radius)}")
    print(f"Time range: t0 = {_g(args.t0)}, tf = {_g(args.tf)}, dt = {_g(args.dt)}")
    samples = circle_motion(
        args.omega, args.x0, args.y0, args.radius, args.t0, args.tf, args.dt
    )
    print(f"Time period T = {_g(2.0 * math.pi / args.omega)}")
    write_table(args.output, _MOTION_COLUMNS, _rows(samples))


def _lissajous(args: argparse.Namespace) -> None:
    samples = lissajous(args.w1, args.w2, args.tf, args.dt)
    print(f"w1 = {_g(args.w1)}, w2 = {_g(args.w2)}")
    print(f"t0 = 0, tf = {_g(args.tf)}, dt = {_g(args.dt)}")
    t1 = 2.0 * math.pi / args.w1
    t2 = 2.0 * math.pi / args.w2
    print(f"T1 = {_g(t1)}, T2 = {_g(t2)}")
    write_table(args.output, _MOTION_COLUMNS, _rows(samples), precision=10)


def _projectile(args: argparse.Namespace) -> None:
    print(
        f"v0 = {_g(args.v0)}  theta = {_g(args.theta)}°  t0 = 0"
        f"  tf = {_g(args.tf)}  dt = {_g(args.dt)}"
    )
    samples = projectile(args.v0, args.theta, args.tf, args.dt)
    print(f"v0x = {_g(samples[0].vx)}  v0y = {_g(samples[0].vy)}" if samples else "")
    write_table(args.output, _MOTION_COLUMNS, _rows(samples))


def _projectile_air(args: argparse.Namespace) -> None:
    print(f"k = {_g(args.k)}")
    print(f"v0= {_g(args.v0)} theta= {_g(args.theta)}o (degrees)")
    print(f"t0= 0 tf= {_g(args.tf)} dt= {_g(args.dt)}")
    samples = projectile_air_resistance(args.k, args.v0, args.theta, args.tf, args.dt)
    theta = math.radians(args.theta)
    print(f"v0x= {_g(args.v0 * math.cos(theta))} v0y= {_g(args.v0 * math.sin(theta))}")
    write_table(args.output, _MOTION_COLUMNS, _rows(samples), precision=17)


def _pendulum(args: argparse.Namespace) -> None:
    print(f"l= {_g(args.length)} theta0= {_g(args.theta0)}")
    print(f"t0 = {_g(args.t0)} tf = {_g(args.tf)} dt = {_g(args.dt)}")
    samples = pendulum(args.length, args.theta0, args.t0, args.tf, args.dt)
    omega = math.sqrt(9.81 / args.length)
    print(f"omega = {_g(omega)} T = {_g(2.0 * math.pi / omega)}")
    write_table(
        args.output,
        (*_MOTION_COLUMNS, "theta(𝚯)", "dθ"),
        ((s.t, s.x, s.y, s.vx, s.vy, s.theta, s.dtheta_dt) for s in samples),
    )


def _box1d_table(args: argparse.Namespace, simulate: Callable[..., list]) -> None:
    print(f"t0 = {args.t0}\ntf = {args.tf}\ndt = {args.dt}")
    samples = simulate(args.length, args.x0, args.v0, args.t0, args.tf, args.dt)
    write_table(
        args.output,
        ("Time(s)", "x(t)", "v(t)"),
        ((s.t, s.x, s.v) for s in samples),
        precision=9,
        width=17,
    )


def _box1d(args: argparse.Namespace) -> None:
    _box1d_table(args, box1d)


def _box1d_euler(args: argparse.Namespace) -> None:
    _box1d_table(args, box1d_euler)


def _box2d(args: argparse.Namespace) -> None:
    print("Motion of a free particle in a box 0 < x < Lx 0 < y < Ly")
    print(f"t0 = {args.t0}\ntf = {args.tf}\ndt = {args.dt}")
    result = box2d(
        args.lx, args.ly, args.x0, args.y0, args.vx, args.vy,
        args.t0, args.tf, args.dt,
    )
    write_table(
        args.output,
        ("Time(s)", "x(t)", "y(t)", "vx(t)", "vy(t)"),
        _rows(result.samples),
        separator=", ",
        precision=17,
    )
    print(f"Number of x bounces = {result.x_bounces}")
    print(f"Number of y bounces = {result.y_bounces}")


def _minigolf(args: argparse.Namespace) -> None:
    print(f"Lx = {_g(args.lx)} Ly = {_g(args.ly)}")
    print(f" (xc, yc) = ( {_g(args.xc)}, {_g(args.yc)} )  R= {_g(args.radius)}")
    print(f"v0= {_g(args.v0)} theta= {_g(args.theta)} degrees ")
    result = minigolf(
        args.lx, args.ly, args.xc, args.yc, args.radius, args.v0, args.theta, args.dt
    )
    first = result.samples[0]
    print(f"x0= {_g(first.x)} y0= {_g(first.y)} v0x= {_g(first.vx)} v0y= {_g(first.vy)}")
    write_table(
        args.output, _MOTION_COLUMNS, _rows(result.samples),
        separator=", ", precision=17,
    )
    print("Number of collisions:")
    print(f"Result= {result.result} nx= {result.x_bounces} ny= {result.y_bounces}")


_COMMANDS: tuple[tuple[str, str, tuple[str, ...], str, Callable], ...] = (
    ("circle", "uniform circular motion",
     ("omega", "x0", "y0", "radius", "t0", "tf", "dt"), "Circle.dat", _circle),
    ("lissajous", "Lissajous figure",
     ("w1", "w2", "tf", "dt"), "Lissajous.dat", _lissajous),
    ("projectile", "projectile without air resistance",
     ("v0", "theta", "tf", "dt"), "Projectile.dat", _projectile),
    ("projectile-air", "projectile with linear air resistance",
     ("k", "v0", "theta", "tf", "dt"), "ProjectileAirResistance.dat", _projectile_air),
    ("pendulum", "small-angle simple pendulum",
     ("length", "theta0", "t0", "tf", "dt"), "SimplePendulum.dat", _pendulum),
    ("box1d", "free particle in a 1D box, closed form",
     ("length", "x0", "v0", "t0", "tf", "dt"), "box1D.dat", _box1d),
    ("box1d-euler", "free particle in a 1D box, stepped",
     ("length", "x0", "v0", "t0", "tf", "dt"), "box1D_1.dat", _box1d_euler),
    ("box2d", "free particle in a 2D box",
     ("lx", "ly", "x0", "y0", "vx", "vy", "t0", "tf", "dt"), "box2D.dat", _box2d),
    ("minigolf", "minigolf shot at a hole",
     ("lx", "ly", "xc", "yc", "radius", "v0", "theta", "dt"), "MiniGolf.dat", _minigolf),
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="physsims", description="Run a simulation and write its data table."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, description, numbers, default_output, handler in _COMMANDS:
        sub = commands.add_parser(name, help=description, description=description)
        for number in numbers:
            sub.add_argument(number, type=float)
        sub.add_argument(
            "-o", "--output", default=default_output,
            help=f"data file to write (default: {default_output})",
        )
        sub.set_defaults(handler=handler)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command given in ``argv``; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (ValueError, OverflowError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())