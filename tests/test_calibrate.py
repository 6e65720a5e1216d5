from dataclasses import dataclass
from typing import Optional, Tuple

import pytest

from iptsd.calibrate import Calibrator


@dataclass
class _Contact:
    size: Tuple[float, float]
    stable: Optional[bool] = None


def _values(snippet):
    out = {}
    for line in snippet.splitlines():
        if " = " in line:
            key, value = line.split(" = ")
            out[key] = float(value)
    return out


@pytest.fixture
def filled():
    calib = Calibrator(3.0, 4.0)
    calib.add_contacts(
        _Contact((0.01 + i * 0.002, 0.02 + i * 0.003), True) for i in range(150)
    )
    return calib


def test_empty_raises():
    with pytest.raises(ValueError):
        Calibrator(3.0, 4.0).min_max()


def test_unstable_contacts_are_skipped():
    calib = Calibrator(3.0, 4.0)
    calib.add_contacts([_Contact((0.1, 0.2), False)])
    with pytest.raises(ValueError):
        calib.min_max()


def test_single_contact():
    calib = Calibrator(3.0, 4.0)
    calib.add_contacts([_Contact((0.1, 0.2))])
    size_min, size_max, aspect_min, aspect_max = calib.min_max()
    assert size_min == size_max
    assert aspect_min == aspect_max == pytest.approx(2.0)


def test_percentiles_within_range(filled):
    size_min, size_max, aspect_min, aspect_max = filled.min_max()
    assert min(filled.sizes) <= size_min < size_max <= max(filled.sizes)
    assert min(filled.aspects) <= aspect_min <= aspect_max <= max(filled.aspects)
    assert len(filled.sizes) == 150


def test_snippet_without_slack_matches_min_max(filled):
    snippet = filled.config_snippet(0.0)
    size_min, size_max, aspect_min, aspect_max = filled.min_max()
    assert "[Contacts]" in snippet
    assert "# Samples: 150" in snippet
    values = _values(snippet)
    assert values["SizeMin"] == float(f"{size_min:.3f}")
    assert values["SizeMax"] == float(f"{size_max:.3f}")
    assert values["AspectMin"] == float(f"{aspect_min:.3f}")
    assert values["AspectMax"] == float(f"{aspect_max:.3f}")


def test_slack_widens_limits(filled):
    tight = _values(filled.config_snippet(0.0))
    loose = _values(filled.config_snippet(0.5))
    assert loose["SizeMin"] <= tight["SizeMin"]
    assert loose["SizeMax"] >= tight["SizeMax"] + 0.5 - 1e-3
    assert loose["SizeMin"] >= 0.0
    assert loose["AspectMin"] >= 1.0
    assert loose["AspectMax"] >= tight["AspectMax"]


def test_write_file(filled, tmp_path):
    path = tmp_path / "calib.conf"
    filled.write_file(path, 0.1)
    assert path.read_text() == filled.config_snippet(0.1)


def test_write_snippets(filled, tmp_path):
    paths = filled.write_snippets(tmp_path, timestamp=123)
    assert [p.name for p in paths] == [
        "iptsd_calib_123_0mm.conf",
        "iptsd_calib_123_2mm.conf",
        "iptsd_calib_123_10mm.conf",
    ]
    assert paths[0].read_text() == filled.config_snippet(0.0)
    assert paths[1].read_text() == filled.config_snippet(0.1)
    assert paths[2].read_text() == filled.config_snippet(0.5)