"""Building blocks for IPTS touch data: readers, HID reports, configuration,
contact clustering, stabilization and calibration."""

__version__ = "0.1.0"