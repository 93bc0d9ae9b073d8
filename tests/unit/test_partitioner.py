"""Unit tests for ZonePartitioner."""

import pytest

from wardrobes.domain import ContentType, Divider, ZonePartitioner
from wardrobes.domain.services.partitioner import MIN_ZONE_WIDTH


@pytest.fixture
def partitioner() -> ZonePartitioner:
    return ZonePartitioner()


class TestZonePartitioner:
    """Tests for splitting the cabinet width at divider positions."""

    def test_no_dividers_gives_single_zone(self, partitioner: ZonePartitioner) -> None:
        zones = partitioner.partition(2000, [], 19, height=2400)

        assert len(zones) == 1
        assert zones[0].position == 0
        assert zones[0].width == 2000
        assert zones[0].height == 2400

    def test_single_divider(self, partitioner: ZonePartitioner) -> None:
        zones = partitioner.partition(2000, [990.5], 19)

        assert [(z.index, z.position, z.width) for z in zones] == [
            (0, 0.0, 990.5),
            (1, 1009.5, 990.5),
        ]

    def test_later_zones_start_after_the_divider(self, partitioner: ZonePartitioner) -> None:
        zones = partitioner.partition(3000, [1000, 2000], 19)

        assert zones[1].position == 1019
        assert zones[2].position == 2019
        assert zones[2].end == 3000

    def test_accepts_divider_records(self, partitioner: ZonePartitioner) -> None:
        dividers = [Divider(index=0, position=600), Divider(index=1, position=1200)]

        zones = partitioner.partition(1800, dividers, 19)

        assert len(zones) == 3

    def test_unsorted_positions_are_sorted(self, partitioner: ZonePartitioner) -> None:
        zones = partitioner.partition(3000, [2000, 1000], 19)

        assert [z.position for z in zones] == [0, 1019, 2019]

    def test_narrow_interval_is_dropped_and_zones_renumbered(
        self, partitioner: ZonePartitioner
    ) -> None:
        zones = partitioner.partition(2000, [1000, 1070], 19)

        assert len(zones) == 2
        assert [z.index for z in zones] == [0, 1]
        assert zones[1].position == 1089

    def test_minimum_width_is_configurable(self) -> None:
        zones = ZonePartitioner(min_zone_width=0).partition(2000, [1000, 1070], 19)

        assert len(zones) == 3

    def test_zones_and_dividers_cover_the_width(self, partitioner: ZonePartitioner) -> None:
        positions = [500, 1100, 1900]
        zones = partitioner.partition(2600, positions, 19)

        assert sum(z.width for z in zones) + 19 * len(positions) == pytest.approx(2600)

    def test_dropped_interval_leaves_a_narrow_remainder(
        self, partitioner: ZonePartitioner
    ) -> None:
        zones = partitioner.partition(2000, [1000, 1070], 19)

        remainder = 2000 - sum(z.width for z in zones) - 19 * 2
        assert remainder == pytest.approx(51)
        assert 0 <= remainder < MIN_ZONE_WIDTH

    def test_partition_is_idempotent(self, partitioner: ZonePartitioner) -> None:
        first = partitioner.partition(2400, [790, 1590], 19, height=2400)
        second = partitioner.partition(2400, [790, 1590], 19, height=2400)

        assert first == second

    def test_new_zones_are_empty(self, partitioner: ZonePartitioner) -> None:
        zones = partitioner.partition(2000, [990.5], 19)

        assert all(z.content_type == ContentType.EMPTY for z in zones)
