"""Configuration dataclasses for a simulation run.

Provides :class:`InitialConditions` for the starting attitude, velocity and
position, and :class:`SimulationConfig` for the step size and horizon of a
single run.  Both are frozen and validated on construction, so a run that
starts has well-formed inputs.

Initial conditions are held as NumPy ``float64`` arrays regardless of the
active JAX dtype; :func:`~strapjax.simulation.state.initial_state` casts them
to the configured dtype when a run starts.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from strapjax.constants import DEFAULT_AIRSPEED_KNOTS, DEFAULT_TOTAL_TIME, KNOTS2FPS


def _zeros3() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


def _default_body_velocity() -> np.ndarray:
    return np.array([DEFAULT_AIRSPEED_KNOTS * KNOTS2FPS, 0.0, 0.0], dtype=np.float64)


@dataclass(frozen=True)
class InitialConditions:
    """Vehicle state at ``t = 0``.

    Args:
        euler: Euler angles ``[phi, theta, psi]`` [rad].
        body_velocity: Body-frame velocity [ft/s], constant for the run.
        position: NED position [ft].
        dcm: Body-to-NED direction cosine matrix.

    Raises:
        ValueError: If a vector is not shape ``(3,)``, the DCM is not
            ``(3, 3)``, or a DCM row has zero norm.

    Examples:
        ```python
        ic = InitialConditions.from_airspeed(60.0)
        float(ic.body_velocity[0])  # 101.2686
        ```
    """

    euler: np.ndarray = field(default_factory=_zeros3)
    body_velocity: np.ndarray = field(default_factory=_default_body_velocity)
    position: np.ndarray = field(default_factory=_zeros3)
    dcm: np.ndarray = field(default_factory=lambda: np.eye(3, dtype=np.float64))

    def __post_init__(self):
        for name in ("euler", "body_velocity", "position"):
            value = np.asarray(getattr(self, name), dtype=np.float64)
            if value.shape != (3,):
                raise ValueError(f"{name} must have shape (3,), got {value.shape}")
            object.__setattr__(self, name, value)

        dcm = np.asarray(self.dcm, dtype=np.float64)
        if dcm.shape != (3, 3):
            raise ValueError(f"dcm must have shape (3, 3), got {dcm.shape}")
        row_norms = np.linalg.norm(dcm, axis=1)
        if np.any(row_norms == 0.0):
            raise ValueError(
                f"dcm rows must have non-zero norm for renormalization, got row norms {row_norms}"
            )
        object.__setattr__(self, "dcm", dcm)

    @staticmethod
    def from_airspeed(airspeed_knots: float = DEFAULT_AIRSPEED_KNOTS) -> InitialConditions:
        """Level, unrotated vehicle at the origin flying along body x.

        Args:
            airspeed_knots: Airspeed [kt], converted with
                :data:`~strapjax.constants.KNOTS2FPS`.

        Returns:
            InitialConditions: Zero attitude and position, identity DCM.
        """
        return InitialConditions(
            body_velocity=np.array([airspeed_knots * KNOTS2FPS, 0.0, 0.0], dtype=np.float64),
        )


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of a single simulation run.

    Args:
        dt: Timestep [s].
        total_time: Horizon [s].  The run takes ``floor(total_time / dt)``
            steps; a trailing partial step is dropped.
        initial: Initial conditions.

    Raises:
        ValueError: If ``dt`` or ``total_time`` is not positive, or ``dt``
            exceeds ``total_time``.
    """

    dt: float
    total_time: float = DEFAULT_TOTAL_TIME
    initial: InitialConditions = field(default_factory=InitialConditions)

    def __post_init__(self):
        if not self.dt > 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if not self.total_time > 0.0:
            raise ValueError(f"total_time must be positive, got {self.total_time}")
        if self.dt > self.total_time:
            raise ValueError(
                f"dt ({self.dt}) must not exceed total_time ({self.total_time})"
            )
