"""Configuration of the daemon and of the contact detection pipeline."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

__all__ = [
    "NeutralAlgorithm",
    "DetectionConfig",
    "ValidationConfig",
    "StabilityConfig",
    "ContactsConfig",
    "Config",
    "narrow",
]

Vector2 = tuple[float, float]


def narrow(value: float, lower: float, upper: float) -> float:
    """Return ``value`` if it fits into ``[lower, upper]`` without loss.

    Raises :class:`OverflowError` if the value lies outside the range, or if
    an integral range is given and the value has a fractional part.
    """
    if math.isnan(value) or not lower <= value <= upper:
        raise OverflowError(f"{value!r} does not fit into [{lower!r}, {upper!r}]")
    if isinstance(lower, int) and isinstance(upper, int) and isinstance(value, float):
        if not value.is_integer():
            raise OverflowError(f"{value!r} cannot be narrowed to an integer")
        return int(value)
    return value


def _divide(value: float, divisor: float) -> float:
    """Floating point division that yields inf / nan instead of raising."""
    if divisor == 0:
        if value == 0 or math.isnan(value):
            return math.nan
        return math.copysign(math.inf, value) * math.copysign(1.0, divisor)
    return value / divisor


class NeutralAlgorithm(enum.Enum):
    """How the neutral value of a heatmap is determined."""

    MODE = "mode"
    AVERAGE = "average"
    CONSTANT = "constant"


@dataclass
class DetectionConfig:
    """Options for the contact detection phase."""

    normalize: bool = False
    """Whether output dimensions are normalized."""
    neutral_value_algorithm: NeutralAlgorithm = NeutralAlgorithm.MODE
    neutral_value_offset: float = 0.0
    """Added to the neutral value; is the neutral value for CONSTANT."""
    neutral_value_backoff: int = 1
    """Frames to wait before recalculating the neutral value."""
    activation_threshold: float = 24.0
    deactivation_threshold: float = 20.0


@dataclass
class ValidationConfig:
    """Options for the contact validation phase."""

    track_validity: bool = False
    size_limits: Vector2 | None = None
    aspect_limits: Vector2 | None = None


@dataclass
class StabilityConfig:
    """Limits that changes of a contact between two frames may not exceed."""

    size_threshold: Vector2 | None = None
    position_threshold: Vector2 | None = None
    orientation_threshold: Vector2 | None = None


@dataclass
class ContactsConfig:
    """Options for all phases of contact processing."""

    detection: DetectionConfig = field(default_factory=DetectionConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    stability: StabilityConfig = field(default_factory=StabilityConfig)


@dataclass
class Config:
    """Settings of the daemon, grouped as in its configuration files."""

    # [Config]
    invert_x: bool = False
    invert_y: bool = False
    width: float = 0.0
    height: float = 0.0

    # [Touch]
    touch_disable: bool = False
    touch_disable_on_palm: bool = False
    touch_disable_on_stylus: bool = False
    touch_overshoot: float = 0.5

    # [Contacts]
    contacts_neutral: str = "mode"
    contacts_neutral_value: float = 0.0
    contacts_activation_threshold: float = 24.0
    contacts_deactivation_threshold: float = 20.0
    contacts_size_thresh_min: float = 0.1
    contacts_size_thresh_max: float = 0.5
    contacts_position_thresh_min: float = 0.04
    contacts_position_thresh_max: float = 2.0
    contacts_orientation_thresh_min: float = 1.0
    contacts_orientation_thresh_max: float = 5.0
    contacts_size_min: float = 0.2
    contacts_size_max: float = 2.0
    contacts_aspect_min: float = 1.0
    contacts_aspect_max: float = 2.5

    # [Stylus]
    stylus_disable: bool = False
    stylus_tip_distance: float = 0.0

    # [DFT]
    dft_position_min_amp: int = 50
    dft_position_min_mag: int = 2000
    dft_position_exp: float = -0.7
    dft_button_min_mag: int = 1000
    dft_freq_min_mag: int = 10000
    dft_tilt_min_mag: int = 10000
    dft_tilt_distance: float = 0.6

    def contacts(self) -> ContactsConfig:
        """Build the configuration for contact detection from these settings."""
        config = ContactsConfig()
        detection = config.detection

        detection.normalize = True
        detection.activation_threshold = self.contacts_activation_threshold / 255.0
        detection.deactivation_threshold = self.contacts_deactivation_threshold / 255.0

        try:
            detection.neutral_value_algorithm = NeutralAlgorithm(self.contacts_neutral)
        except ValueError:
            pass

        detection.neutral_value_offset = self.contacts_neutral_value / 255.0
        detection.neutral_value_backoff = 16

        diagonal = math.hypot(self.width, self.height)

        config.validation.track_validity = True
        config.validation.size_limits = (
            _divide(self.contacts_size_min, diagonal),
            _divide(self.contacts_size_max, diagonal),
        )
        config.validation.aspect_limits = (
            self.contacts_aspect_min,
            self.contacts_aspect_max,
        )

        config.stability.size_threshold = (
            _divide(self.contacts_size_thresh_min, diagonal),
            _divide(self.contacts_size_thresh_max, diagonal),
        )
        config.stability.position_threshold = (
            _divide(self.contacts_position_thresh_min, diagonal),
            _divide(self.contacts_position_thresh_max, diagonal),
        )
        config.stability.orientation_threshold = (
            self.contacts_orientation_thresh_min / 180,
            self.contacts_orientation_thresh_max / 180,
        )

        return config