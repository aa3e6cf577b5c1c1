"""Free particles bouncing in one- and two-dimensional boxes, and a minigolf shot."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from .analytic import Sample


def _f32(value: float) -> float:
    """Round a value to single precision, as the box simulations compute in it."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Box1DSample:
    """Position and velocity of a particle in a one-dimensional box at time ``t``."""

    t: float
    x: float
    v: float


@dataclass(frozen=True)
class Box2DResult:
    """Recorded motion in a two-dimensional box and the number of wall bounces."""

    samples: list[Sample]
    x_bounces: int
    y_bounces: int


@dataclass(frozen=True)
class GolfResult:
    """Recorded motion of a minigolf ball and how the shot ended."""

    samples: list[Sample]
    holed: bool
    x_bounces: int
    y_bounces: int

    @property
    def result(self) -> str:
        """``"Success"`` when the ball dropped into the hole, else ``"Failure"``."""
        return "Success" if self.holed else "Failure"


def _check_box1d(length: float, x0: float, v0: float) -> None:
    if length <= 0.0:
        raise ValueError("L <= 0")
    if x0 < 0.0:
        raise ValueError("x0 < 0")
    if x0 > length:
        raise ValueError("x0 > L")
    if v0 == 0.0:
        raise ValueError("v0 = 0")


def _advance(t: float, dt: float) -> float:
    following = _f32(t + dt)
    if following == t:
        raise ValueError("dt is too small to advance the clock")
    return following


def box1d(
    length: float, x0: float, v0: float, t0: float, tf: float, dt: float
) -> list[Box1DSample]:
    """Particle in 0 < x < length from the closed form x = x0 + v0 (t - t0).

    On leaving the box the reference position becomes the current one and
    the velocity is reversed; the reference time stays at ``t0``.
    """
    length, x0, v0, t0, tf, dt = map(_f32, (length, x0, v0, t0, tf, dt))
    _check_box1d(length, x0, v0)
    if dt <= 0.0:
        raise ValueError("dt must be positive")
    samples = []
    t = t0
    while t < tf:
        x = _f32(x0 + _f32(v0 * _f32(t - t0)))
        samples.append(Box1DSample(t, x, v0))
        if x < 0.0 or x > length:
            x0 = x
            v0 = -v0
        t = _advance(t, dt)
    return samples


def box1d_euler(
    length: float, x0: float, v0: float, t0: float, tf: float, dt: float
) -> list[Box1DSample]:
    """Particle in 0 < x < length stepped with x = x + v dt, reflecting at the walls."""
    length, x0, v0, t0, tf, dt = map(_f32, (length, x0, v0, t0, tf, dt))
    _check_box1d(length, x0, v0)
    if dt <= 0.0:
        raise ValueError("dt must be positive")
    samples = []
    t, x, v = t0, x0, v0
    while t < tf:
        samples.append(Box1DSample(t, x, v))
        x = _f32(x + _f32(v * dt))
        t = _advance(t, dt)
        if x < 0.0 or x > length:
            v = -v
    return samples


def box2d(
    lx: float,
    ly: float,
    x0: float,
    y0: float,
    vx: float,
    vy: float,
    t0: float,
    tf: float,
    dt: float,
) -> Box2DResult:
    """Particle in 0 < x < lx, 0 < y < ly stepped with x = x + v dt.

    The first sample is at ``t0``; the clock of step ``i`` is ``y0 + i dt``.
    """
    lx, ly, x0, y0, vx, vy, t0, tf, dt = map(
        _f32, (lx, ly, x0, y0, vx, vy, t0, tf, dt)
    )
    if lx <= 0.0 or ly <= 0.0:
        raise ValueError("Lx and Ly should be +ve")
    if x0 < 0.0 or x0 > lx:
        raise ValueError("The range of x will be: 0 < x0 < Lx")
    if y0 < 0.0 or y0 > ly:
        raise ValueError("The range of y will be: 0 < y0 < Ly")
    if _f32(_f32(vx * vx) + _f32(vy * vy)) == 0.0:
        raise ValueError("v0 = 0")
    if dt <= 0.0:
        raise ValueError("dt must be positive")

    samples = []
    x_bounces = y_bounces = 0
    step = 0
    t, x, y = t0, x0, y0
    while t < tf:
        samples.append(Sample(t, x, y, vx, vy))
        step += 1
        t = _f32(y0 + _f32(_f32(step) * dt))
        x = _f32(x + _f32(vx * dt))
        y = _f32(y + _f32(vy * dt))
        if x < 0.0 or x > lx:
            vx = -vx
            x_bounces += 1
        if y < 0.0 or y > ly:
            vy = -vy
            y_bounces += 1
    return Box2DResult(samples, x_bounces, y_bounces)


def minigolf(
    lx: float,
    ly: float,
    xc: float,
    yc: float,
    radius: float,
    v0: float,
    theta_deg: float,
    dt: float,
) -> GolfResult:
    """Shoot a ball from (0, ly/2) into a box open at x = 0 with a hole at (xc, yc).

    The shot ends in the hole (success) or back out through x = 0 (failure).
    """
    if lx <= 0.0:
        raise ValueError("Lx <= 0")
    if ly <= 0.0:
        raise ValueError("Ly <= 0")
    if v0 <= 0.0:
        raise ValueError("v0 <= 0")
    if abs(theta_deg) > 90.0:
        raise ValueError("theta > 90")
    if dt <= 0.0:
        raise ValueError("dt must be positive")

    theta = math.radians(theta_deg)
    vx = v0 * math.cos(theta)
    vy = v0 * math.sin(theta)
    radius_squared = radius * radius

    samples = []
    x_bounces = y_bounces = 0
    step = 0
    t, x, y = 0.0, 0.00001, ly / 2.0
    while True:
        samples.append(Sample(t, x, y, vx, vy))
        step += 1
        t = step * dt
        x += vx * dt
        y += vy * dt
        if x > lx:
            vx = -vx
            x_bounces += 1
        if y < 0.0:
            vy = -vy
            y_bounces += 1
        if y > ly:
            vy = -vy
            y_bounces += 1
        if x <= 0.0:
            holed = False
            break
        if (x - xc) ** 2 + (y - yc) ** 2 <= radius_squared:
            holed = True
            break
    return GolfResult(samples, holed, x_bounces, y_bounces)