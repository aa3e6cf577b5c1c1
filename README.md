# physsims

Small classical-mechanics simulations. Each one computes a trajectory,
either from a closed-form solution or by stepping the motion forward in
time, and the results can be written out as whitespace- or
comma-separated data tables for plotting with any tool you like.

## Installation

```
pip install .
```

Python 3.10 or later is required; there are no third-party dependencies.

## Command line

The `physsims` command takes a simulation name followed by its numeric
parameters as positional arguments. Each simulation writes its data table
to a default file, which `-o`/`--output` overrides. It prints a short
summary of the inputs (and, where there is one, of the outcome) to
standard output.

| Command          | Parameters                                  | Default output                |
|------------------|---------------------------------------------|-------------------------------|
| `circle`         | `omega x0 y0 radius t0 tf dt`               | `Circle.dat`                  |
| `lissajous`      | `w1 w2 tf dt`                               | `Lissajous.dat`               |
| `projectile`     | `v0 theta tf dt`                            | `Projectile.dat`              |
| `projectile-air` | `k v0 theta tf dt`                          | `ProjectileAirResistance.dat` |
| `pendulum`       | `length theta0 t0 tf dt`                    | `SimplePendulum.dat`          |
| `box1d`          | `length x0 v0 t0 tf dt`                     | `box1D.dat`                   |
| `box1d-euler`    | `length x0 v0 t0 tf dt`                     | `box1D_1.dat`                 |
| `box2d`          | `lx ly x0 y0 vx vy t0 tf dt`                | `box2D.dat`                   |
| `minigolf`       | `lx ly xc yc radius v0 theta dt`            | `MiniGolf.dat`                |

Angles (`theta`) are in degrees. For example:

```
physsims minigolf 10 5 8 2.5 0.3 4 0 0.001
physsims circle 1 0 0 1 0 6.3 0.01 -o orbit.dat
physsims --help
physsims box2d --help
```

The `minigolf` command reports `Result= Success` or `Result= Failure`
together with the number of bounces off the x and y walls; `box2d`
reports the bounce counts as well. Invalid input is reported on standard
error as `Error: ...` and the command exits with status 1.

The tables have a header row followed by one row per time step. Most are
space separated; `box2d` and `minigolf` tables are comma separated, and
the `box1d` tables right-align each field to 17 characters.

## Library use

Closed-form motion (`physsims.analytic`), each returning a list of
`Sample` records with fields `t`, `x`, `y`, `vx`, `vy`:

- `circle_motion(omega, x0, y0, radius, t0, tf, dt)` – uniform circular motion
- `lissajous(w1, w2, tf, dt, radius=1.0)` – a Lissajous figure from `t = 0`
- `projectile(v0, theta_deg, tf, dt)` – a projectile without drag
- `projectile_air_resistance(k, v0, theta_deg, tf, dt)` – with linear drag `k`
- `pendulum(length, theta0, t0, tf, dt)` – a small-angle simple pendulum,
  returning `PendulumSample` records that also carry `theta` and `dtheta_dt`
- `time_steps(t0, tf, dt)` – the time grid used above: `t0, t0+dt, ...`
  accumulated while the time is at most `tf`

Stepped motion (`physsims.box`):

- `box1d(...)` and `box1d_euler(...)` – a free particle between two walls,
  returning `Box1DSample` records (`t`, `x`, `v`); both compute in single
  precision
- `box2d(...)` – a free particle in a rectangle, returning a `Box2DResult`
  with `samples`, `x_bounces` and `y_bounces`
- `minigolf(...)` – a ball shot from `(0, ly/2)` into a box open at `x = 0`,
  returning a `GolfResult` with `samples`, `holed`, the bounce counts and a
  `result` property (`"Success"` or `"Failure"`)

Output and playback:

- `physsims.datfile.write_table(path, columns, rows, separator=" ",
  precision=6, width=0)` writes a table and returns the number of rows;
  `format_number(value, precision=6)` formats to significant digits.
- `physsims.playback.Trajectory(times, xs, ys, scale=35.0)` replays
  recorded positions in a loop: `index_at(time)` finds the last sample at
  or before a time, and `position_at(elapsed)` gives the scaled,
  linearly interpolated position (using `lerp`).

Invalid inputs, such as a non-positive radius, speed, box size or time
step, or an out-of-range launch angle, raise `ValueError`.

```python
from physsims.analytic import circle_motion, projectile
from physsims.box import box2d, minigolf
from physsims.datfile import write_table

orbit = circle_motion(omega=1.0, x0=0.0, y0=0.0, radius=1.0,
                      t0=0.0, tf=6.3, dt=0.01)
write_table("orbit.dat", ("t", "x", "y"), ((s.t, s.x, s.y) for s in orbit))

shot = projectile(v0=10.0, theta_deg=45.0, tf=1.5, dt=0.01)

bounces = box2d(lx=10.0, ly=5.0, x0=1.0, y0=1.0, vx=2.0, vy=3.0,
                t0=0.0, tf=20.0, dt=0.01)

putt = minigolf(lx=10.0, ly=5.0, xc=8.0, yc=2.5, radius=0.3,
                v0=4.0, theta_deg=0.0, dt=0.001)
print(putt.result, putt.x_bounces, putt.y_bounces)
```

## What it does not do

The package draws nothing: there is no plotting window or animated
viewer, and `Trajectory` only computes positions for a caller to display.
It also has no reader for data tables; to replay a written table, load
its columns yourself and pass them to `Trajectory`.

## Running the tests

```
pip install ".[test]"
pytest
```