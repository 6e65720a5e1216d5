# iptsd

Building blocks for processing touch data from IPTS touchscreens. The package
is written in Python and uses numpy.

## Modules

- `iptsd.reader`: `Reader` is a cursor over a byte buffer.
  - `read(size)` returns a copy of the next bytes.
  - `skip(size)` moves past bytes.
  - `subspan(size)` splits off a `memoryview`.
  - `sub(size)` splits off a new `Reader`.
  - `unpack(fmt)` reads a `struct` format. It returns a single value for a one-field format and a tuple otherwise.
  - `len(reader)` gives the number of bytes still unread.
  - Asking for more bytes than are left raises `ReadError`, which is a subclass of `EOFError`.
- `iptsd.hid`: `ReportType`, `Usage` and `Report`.
  - A `Report` keeps its type, its optional ID, its total size in bits (count × size) and its set of usages.
  - `find_usage(page, value)` accepts either two integers or a `Usage`.
  - `merge(other)` combines two reports that share a type and an ID. If either differs it raises `ValueError`.
- `iptsd.device`: `DeviceInfo` holds a vendor, a product and a buffer size.
  - `from_bytes` and `to_bytes` convert to and from the 16-byte little-endian block, which has four padding bytes after the product ID.
  - A wrong length or an out-of-range value raises `ValueError`.
- `iptsd.signals`:
  - `handle_signal(signum, callback)` installs a handler that calls `callback(signum)`. It returns a guard that removes the handler again, either through `close()` or at the end of a `with` block.
  - `clear_handler(signum)` restores the handler that was installed before.
- `iptsd.config`: `Config` holds the daemon settings with their defaults.
  - `Config.contacts()` derives a `ContactsConfig`, which bundles a `DetectionConfig`, a `ValidationConfig` and a `StabilityConfig`. In doing so it scales thresholds by 255, scales limits by the screen diagonal and scales orientation by 180.
  - `NeutralAlgorithm` lists the neutral-value modes.
  - `narrow(value, lower, upper)` checks that a value fits into a range without loss. If it does not, it raises `OverflowError`.
- `iptsd.stabilizer`: `Stabilizer(config)` compares each tracked contact with the contact that had the same index in the previous frame.
  - A change below the lower threshold is discarded.
  - A change above the upper threshold marks the contact as unstable.
  - Size, position and orientation are handled in this way.
  - The contacts are changed in place.
  - `reset()` forgets the previous frame.
- `iptsd.cluster`: `span(heatmap, (x, y), activation, deactivation)` grows a cluster of pixels that lie above the deactivation threshold. Once the value has fallen to the activation threshold it may not rise again. The function returns a bounding `Box`.
- `iptsd.convolution`: `convolve_3x3(data, kernel)` is a 3x3 convolution. Pixels beyond the border take the value of the nearest edge pixel.
- `iptsd.calibrate`: `Calibrator(width, height)` collects the size and aspect ratio of the stable contacts it is given.
  - `min_max()` returns the 1st and 99th percentiles.
  - `config_snippet(slack)` renders a `[Contacts]` snippet.
  - `write_file(path, slack)` writes that snippet to a file.
  - `write_snippets(directory, timestamp)` writes three snippets, with 0.0, 0.1 and 0.5 slack.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Example: calibration

Contacts are any objects that have a `size` pair, normalized to the screen
diagonal, and a `stable` flag, which may be `None`. Contacts whose `stable` is
`False` are skipped.

```python
from pathlib import Path
from types import SimpleNamespace

from iptsd.calibrate import Calibrator

calib = Calibrator(width=26.0, height=17.3)
calib.add_contacts([
    SimpleNamespace(size=(0.020, 0.015), stable=True),
    SimpleNamespace(size=(0.025, 0.018), stable=None),
])
print(calib.min_max())
print(calib.config_snippet(0.1))
calib.write_snippets(Path("."), timestamp=1700000000)
```

## Example: cluster spanning

```python
import numpy as np

from iptsd.cluster import span
from iptsd.convolution import convolve_3x3

heatmap = np.zeros((10, 10))
heatmap[4:6, 4:6] = 1.0
blurred = convolve_3x3(heatmap, np.full((3, 3), 1 / 9))
box = span(blurred, (4, 4), 0.2, 0.1)
print(box.min, box.max)
```

## What the package does not do

The package provides library pieces only. It does not do any of the following:

- It has no command-line tools.
- It does not open or read hidraw devices.
- It does not parse HID descriptors or IPTS touch and stylus data.
- It does not run a complete contact-detection pipeline.
- It does not emit input events.
- It does not render visualizations.

The calibrator is fed contacts by the caller.

## Running the tests

```
pytest
```