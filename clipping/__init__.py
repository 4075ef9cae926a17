"""Ring-set boolean operations used by polygon composition."""

from .rings import Ring, RingSet, Operation, ClippingError, clip
