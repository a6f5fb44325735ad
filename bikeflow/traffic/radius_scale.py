# bikeflow/traffic/radius_scale.py
from __future__ import annotations

import math
from dataclasses import dataclass

UNFILTERED_RANGE = (0.0, 25.0)
# floor of 3 keeps stations with a handful of filtered trips clickable
FILTERED_RANGE = (3.0, 50.0)


@dataclass(frozen=True)
class RadiusScale:
    """
    Square-root scale from [0, domain_max] onto [range_min, range_max].

    domain_max is the busiest station of the unfiltered data. It stays fixed
    while the range switches between the filtered and unfiltered sizes.
    """
    domain_max: float
    range_min: float
    range_max: float

    def __call__(self, traffic: float) -> float:
        if self.domain_max <= 0:
            return 0.0

        x = float(traffic) / self.domain_max
        # signed sqrt, same as a d3 pow scale with exponent 0.5
        frac = math.copysign(math.sqrt(abs(x)), x)
        return self.range_min + (self.range_max - self.range_min) * frac


def make_radius_scale(max_traffic: float, filtered: bool) -> RadiusScale:
    r0, r1 = FILTERED_RANGE if filtered else UNFILTERED_RANGE
    return RadiusScale(domain_max=float(max_traffic), range_min=r0, range_max=r1)
