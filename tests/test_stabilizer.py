from dataclasses import dataclass

import pytest

from iptsd.config import StabilityConfig
from iptsd.stabilizer import Stabilizer


@dataclass
class Contact:
    index: int | None = 0
    size: tuple = (0.2, 0.1)
    mean: tuple = (0.5, 0.5)
    orientation: float = 0.3
    normalized: bool = True
    stable: bool | None = None


def full_config():
    return StabilityConfig(
        size_threshold=(0.01, 0.1),
        position_threshold=(0.01, 0.1),
        orientation_threshold=(0.02, 0.2),
    )


def test_untracked_contact_is_left_alone():
    stabilizer = Stabilizer(full_config())
    contact = Contact(index=None)
    stabilizer.stabilize([contact])
    assert contact.stable is None
    assert contact == Contact(index=None)


def test_first_frame_marks_stable_without_changes():
    stabilizer = Stabilizer(full_config())
    contact = Contact()
    stabilizer.stabilize([contact])
    assert contact.stable is True
    assert contact.mean == (0.5, 0.5)


def test_small_changes_are_discarded():
    stabilizer = Stabilizer(full_config())
    stabilizer.stabilize([Contact()])
    moved = Contact(size=(0.205, 0.1), mean=(0.505, 0.5), orientation=0.31)
    stabilizer.stabilize([moved])
    assert moved.stable is True
    assert moved.size == (0.2, 0.1)
    assert moved.mean == (0.5, 0.5)
    assert moved.orientation == 0.3


def test_medium_changes_are_kept():
    stabilizer = Stabilizer(full_config())
    stabilizer.stabilize([Contact()])
    moved = Contact(size=(0.25, 0.1), mean=(0.55, 0.5), orientation=0.4)
    stabilizer.stabilize([moved])
    assert moved.stable is True
    assert moved.size == (0.25, 0.1)
    assert moved.mean == (0.55, 0.5)
    assert moved.orientation == 0.4


@pytest.mark.parametrize(
    "changes",
    [{"size": (0.5, 0.1)}, {"mean": (0.9, 0.5)}, {"orientation": 0.8}],
)
def test_large_changes_are_unstable(changes):
    stabilizer = Stabilizer(full_config())
    stabilizer.stabilize([Contact()])
    moved = Contact(**changes)
    stabilizer.stabilize([moved])
    assert moved.stable is False


def test_orientation_wraps_around():
    stabilizer = Stabilizer(full_config())
    stabilizer.stabilize([Contact(orientation=0.005)])
    turned = Contact(orientation=0.995)
    stabilizer.stabilize([turned])
    assert turned.stable is True
    assert turned.orientation == 0.005


def test_round_contact_loses_orientation():
    stabilizer = Stabilizer(full_config())
    stabilizer.stabilize([Contact(size=(0.1, 0.1))])
    round_contact = Contact(size=(0.1, 0.1), orientation=0.7)
    stabilizer.stabilize([round_contact])
    assert round_contact.orientation == 0


def test_contacts_matched_by_index():
    stabilizer = Stabilizer(full_config())
    stabilizer.stabilize([Contact(index=1, mean=(0.1, 0.1))])
    other = Contact(index=2, mean=(0.9, 0.9))
    stabilizer.stabilize([other])
    assert other.stable is True
    assert other.mean == (0.9, 0.9)


def test_reset_forgets_previous_frame():
    stabilizer = Stabilizer(full_config())
    stabilizer.stabilize([Contact()])
    stabilizer.reset()
    jumped = Contact(mean=(0.9, 0.9))
    stabilizer.stabilize([jumped])
    assert jumped.stable is True
    assert jumped.mean == (0.9, 0.9)


def test_no_thresholds_means_no_changes():
    stabilizer = Stabilizer(StabilityConfig())
    stabilizer.stabilize([Contact()])
    moved = Contact(size=(0.9, 0.1), mean=(0.501, 0.5), orientation=0.9)
    stabilizer.stabilize([moved])
    assert moved.stable is True
    assert moved == Contact(size=(0.9, 0.1), mean=(0.501, 0.5), orientation=0.9, stable=True)


def test_stored_frame_is_a_copy():
    stabilizer = Stabilizer(full_config())
    first = Contact()
    stabilizer.stabilize([first])
    first.mean = (0.9, 0.9)
    nearby = Contact(mean=(0.505, 0.5))
    stabilizer.stabilize([nearby])
    assert nearby.mean == (0.5, 0.5)