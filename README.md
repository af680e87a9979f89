# basetypes

Plain data types for robotics software, built on numpy.

## Modules

- `basetypes.floats`: `nan()`, `unset()`, `unknown()` and `infinity()`, with the
  matching checks `is_nan`, `is_unset`, `is_unknown` and `is_infinity`. The "unset"
  and "unknown" markers are both NaN.
- `basetypes.linalg`: a frozen `Quaternion` type (`identity`, `from_angle_axis`,
  `from_rotation_matrix`, `rotation_matrix`, `inverse`, `to_angle_axis`, `rotate`,
  `is_approx`, and `*` for both quaternion products and vector rotation).
  It also provides `is_not_nan` and `is_finite`, which test arrays, and
  `guarantee_spd(a, min_eig=0.0)`. That function uses the lower triangle of a
  symmetric matrix and raises every eigenvalue to at least `min_eig`.
- `basetypes.named_vector`: `NamedVector`, which keeps a list of `names` next to a list
  of `elements`. You can index it by name or by integer. A missing name raises
  `InvalidName`, a `LookupError`, and an index out of range raises `IndexError`.
  `resize` pads new slots with empty names. It fills new elements with
  `element_factory()`, or with `None` when no factory is given.
- `basetypes.temperature`: `Temperature`, stored in kelvin and unknown (NaN) by
  default. It offers `from_kelvin`, `from_celsius`, the `celsius` property,
  `is_in_range` (the limits may come in either order) and `is_approx`.
  It supports `+`, `-`, scaling by a number, and `<`/`>`. `str()` gives `[21.5 celsius]`.
- `basetypes.time_value`: `Time`, a signed number of microseconds.
  - Constructors: `now`, `monotonic`, `from_microseconds`, `from_milliseconds`,
    `from_seconds` and `max`.
  - `from_time_values` builds a time from broken-down values in local time.
  - `to_string` and `from_string` convert to and from text. The default format is
    `%Y%m%d-%H:%M:%S`, followed by `:` and the sub-seconds, then the `%z` offset.
    `Resolution` selects seconds, milliseconds or microseconds.
  - `str()` writes `seconds.millis.micros`.
- `basetypes.time_mark`: `TimeMark`, a labelled mark. It reports the wall time since
  the mark (`passed`) and the processor time used since then in microseconds
  (`cycles`).
- `basetypes.timeout`: `Timeout`, offering `restart`, `elapsed` and `time_left`.
  A zero timeout never elapses, and its `time_left` is `Time.max()`.
- `basetypes.twist` and `basetypes.wrench`: `Twist` (linear/angular velocity) and
  `Wrench` (force/torque). Both are NaN by default and offer `set_nan`, `set_zero`,
  `is_valid`, and component-wise `+` and `-`.
- `basetypes.twist_with_covariance`: `TwistWithCovariance`, which holds `vel`, `rot`
  and a 6x6 `cov`. The covariance is unset (NaN) by default.
  - `+` and `-` add the covariances when both are valid.
  - Multiplying by a number scales the covariance by the number squared.
  - Multiplying two twists gives their spatial cross product, with its covariance
    propagated.
  - It also supports `/` by a number and unary `-`.
- `basetypes.waypoint`: `Waypoint`, a position, a heading and tolerances.
  The default position is (1, 0, 0). `Waypoint.unknown()` has every value NaN.
- `basetypes.transform_with_covariance`: `TransformWithCovariance`, a translation and
  a `Quaternion` orientation with an optional 6x6 covariance. The covariance is
  ordered [translation, scaled-axis orientation].
  - Transforms compose with `*`.
  - `composition_inv` and `pre_composition_inv` recover either factor of a
    composition, uncertainty included.
  - `inverse` and `compose_point_with_covariance` carry the covariance through as
    well.
  - `transform` is the 4x4 homogeneous matrix.
- `basetypes.commands`: `LinearAngular6DCommand` has a `time`, `linear` and `angular`,
  all unset by default, with `x`/`y`/`z`/`roll`/`pitch`/`yaw` accessors.
  `Speed6D` holds surge, sway, heave, roll, pitch and yaw speeds.
- `basetypes.timestamped`: `TimeStamped`, which wraps any value with a `Time`.
  `set(value, timestamp=None)` stores a deep copy, stamped with the given time or now.
  `update_time()` restamps the current value with the current time.

## Installation

From the project directory:

```
pip install .
```

## Example

```python
import numpy as np
from basetypes.time_value import Time, Resolution
from basetypes.temperature import Temperature
from basetypes.transform_with_covariance import TransformWithCovariance

t = Time.from_seconds(35.553)
print(t)                                  # 35.553.000
text = t.to_string(Resolution.MICROSECONDS)
assert Time.from_string(text) == t

warm = Temperature.from_celsius(21.5)
print(warm)                               # [21.5 celsius]

pose = TransformWithCovariance.identity()
pose.cov = 0.1 * np.eye(6)
inverse = pose.inverse()
print(inverse.has_valid_covariance())     # True
```

## What it does not do

This is a library of value types only. It has no command-line tool. It offers no
serialization or storage of these types. It has no spline or trajectory types and no
sensor-sample types such as images, scans or rigid-body states.

## Running the tests

```
pip install -e ".[test]"
pytest
```