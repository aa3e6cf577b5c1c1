"""Closed-form trajectories: circular, Lissajous, projectile and pendulum motion."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

STANDARD_GRAVITY = 9.81
# The plain projectile model works with a rounded value of pi.
_PROJECTILE_PI = 3.1415927


@dataclass(frozen=True)
class Sample:
    """Position and velocity of a particle at time ``t``."""

    t: float
    x: float
    y: float
    vx: float
    vy: float


@dataclass(frozen=True)
class PendulumSample(Sample):
    """A pendulum sample, with its angle and angular velocity."""

    theta: float
    dtheta_dt: float


def _steps(t0: float, tf: float, dt: float) -> Iterator[float]:
    t = t0
    while t <= tf:
        yield t
        t += dt


def time_steps(t0: float, tf: float, dt: float) -> Iterator[float]:
    """Yield t0, t0+dt, ... by accumulation while the time is <= tf."""
    if dt <= 0.0:
        raise ValueError("dt must be positive")
    return _steps(t0, tf, dt)


def circle_motion(
    omega: float, x0: float, y0: float, radius: float, t0: float, tf: float, dt: float
) -> list[Sample]:
    """Uniform circular motion about (x0, y0), starting at angle zero at t0."""
    if radius <= 0.0:
        raise ValueError("Invalid radius (R must be positive)")
    if omega <= 0.0:
        raise ValueError("Invalid omega (must be positive)")
    samples = []
    for t in time_steps(t0, tf, dt):
        theta = omega * (t - t0)
        samples.append(
            Sample(
                t,
                x0 + radius * math.cos(theta),
                y0 + radius * math.sin(theta),
                -omega * radius * math.sin(theta),
                omega * radius * math.cos(theta),
            )
        )
    return samples


def lissajous(
    w1: float, w2: float, tf: float, dt: float, radius: float = 1.0
) -> list[Sample]:
    """Lissajous figure x = R cos(w1 t), y = R sin(w2 t) from t = 0."""
    if w1 <= 0.0 or w2 <= 0.0:
        raise ValueError("Angular frequencies must be positive.")
    return [
        Sample(
            t,
            radius * math.cos(w1 * t),
            radius * math.sin(w2 * t),
            -radius * w1 * math.sin(w1 * t),
            radius * w2 * math.cos(w2 * t),
        )
        for t in time_steps(0.0, tf, dt)
    ]


def projectile(v0: float, theta_deg: float, tf: float, dt: float) -> list[Sample]:
    """Projectile launched from the origin without air resistance."""
    if v0 <= 0.0:
        raise ValueError("Illegal value of v0<=0")
    if theta_deg <= 0.0:
        raise ValueError("Illegal value of theta")
    theta = (_PROJECTILE_PI / 180.0) * theta_deg
    v0x = v0 * math.cos(theta)
    v0y = v0 * math.sin(theta)
    g = STANDARD_GRAVITY
    return [
        Sample(t, v0x * t, v0y * t - 0.5 * g * t * t, v0x, v0y - g * t)
        for t in time_steps(0.0, tf, dt)
    ]


def projectile_air_resistance(
    k: float, v0: float, theta_deg: float, tf: float, dt: float
) -> list[Sample]:
    """Projectile from the origin with linear air resistance of coefficient k."""
    if v0 <= 0.0:
        raise ValueError("Illegal value of v0 <= 0")
    if k <= 0.0:
        raise ValueError("Illegal value of k <= 0")
    if theta_deg <= 0.0:
        raise ValueError("Illegal value of theta <= 0")
    if theta_deg >= 90.0:
        raise ValueError("Illegal value of theta >= 90")
    theta = math.radians(theta_deg)
    v0x = v0 * math.cos(theta)
    v0y = v0 * math.sin(theta)
    g = STANDARD_GRAVITY
    samples = []
    for t in time_steps(0.0, tf, dt):
        decay = math.exp(-k * t)
        samples.append(
            Sample(
                t,
                (v0x / k) * (1.0 - decay),
                (1.0 / k) * (v0y + g / k) * (1.0 - decay) - (g / k) * t,
                v0x * decay,
                (v0y + g / k) * decay - g * t,
            )
        )
    return samples


def pendulum(
    length: float, theta0: float, t0: float, tf: float, dt: float
) -> list[PendulumSample]:
    """Small-angle simple pendulum of the given length released at theta0."""
    if length <= 0.0:
        raise ValueError("length must be positive")
    omega = math.sqrt(STANDARD_GRAVITY / length)
    samples = []
    for t in time_steps(t0, tf, dt):
        theta = theta0 * math.cos(omega * (t - t0))
        dtheta_dt = -omega * theta0 * math.sin(omega * (t - t0))
        samples.append(
            PendulumSample(
                t,
                length * math.sin(theta),
                -length * math.cos(theta),
                length * dtheta_dt * math.cos(theta),
                length * dtheta_dt * math.sin(theta),
                theta,
                dtheta_dt,
            )
        )
    return samples