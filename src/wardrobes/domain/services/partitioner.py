"""Zone partitioning from divider positions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..entities import Divider, Zone

logger = logging.getLogger(__name__)

MIN_ZONE_WIDTH = 100.0


class ZonePartitioner:
    """Splits the cabinet width into zones at the divider positions.

    Cut points are ``[0, *sorted(divider positions), total_width]``. The
    first zone starts at 0; every later zone starts right after the
    preceding divider. Intervals narrower than ``min_zone_width`` are
    dropped without error and the remaining zones are renumbered left to
    right. New zones carry no content.
    """

    def __init__(self, min_zone_width: float = MIN_ZONE_WIDTH) -> None:
        self.min_zone_width = min_zone_width

    def partition(
        self,
        total_width: float,
        dividers: Sequence[Divider] | Sequence[float],
        divider_thickness: float,
        height: float = 0.0,
    ) -> list[Zone]:
        """Derive the ordered zones.

        Args:
            total_width: Overall cabinet width in millimeters.
            dividers: Dividers or bare divider positions.
            divider_thickness: Thickness of every divider.
            height: Height assigned to each zone.

        Returns:
            Zones ordered left to right and indexed from 0.
        """
        positions = sorted(
            d.position if isinstance(d, Divider) else float(d) for d in dividers
        )
        cuts = [0.0, *positions, float(total_width)]

        zones: list[Zone] = []
        for number, (cut, next_cut) in enumerate(zip(cuts, cuts[1:])):
            start = 0.0 if number == 0 else cut + divider_thickness
            width = next_cut - start
            if width < self.min_zone_width:
                logger.debug(
                    f"Dropping {width:g}mm interval at {start:g}mm "
                    f"(minimum {self.min_zone_width:g}mm)"
                )
                continue
            zones.append(
                Zone(index=len(zones), position=start, width=round(width, 2), height=height)
            )

        logger.debug(
            f"Partitioned {total_width:g}mm with {len(positions)} dividers "
            f"into {len(zones)} zones"
        )
        return zones
