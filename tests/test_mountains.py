"""24 mountains and heading resolution."""

import pytest

from luopan.mountains import (
    MOUNTAINS, MOUNTAIN_BY_NAME, NORTH_MOUNTAIN, Direction, facing_label,
    find_mountain, mountain_by_name, normalize_heading, resolve_mountain,
)


class TestMountainTable:

    def test_twenty_four_mountains(self):
        assert len(MOUNTAINS) == 24
        assert len(MOUNTAIN_BY_NAME) == 24

    def test_center_angles_step_fifteen(self):
        assert [m.center_angle for m in MOUNTAINS] == [i * 15.0 for i in range(24)]

    def test_exactly_one_arc_wraps(self):
        wrapping = [m for m in MOUNTAINS if m.wraps]
        assert [m.name for m in wrapping] == ["子"]
        assert wrapping[0].start_angle == 352.5
        assert wrapping[0].end_angle == 7.5

    def test_sitting_is_opposite(self):
        for m in MOUNTAINS:
            opposite = MOUNTAINS[(m.index + 12) % 24]
            assert m.sitting == opposite.name
            assert opposite.sitting == m.name

    def test_three_mountains_per_octant_share_trigram(self):
        for direction in Direction:
            if direction is Direction.C:
                continue
            group = [m for m in MOUNTAINS if m.direction is direction]
            assert len(group) == 3
            assert {m.trigram for m in group} == {direction.trigram}

    def test_octant_center_mountains(self):
        assert mountain_by_name("子").direction is Direction.N
        assert mountain_by_name("卯").direction is Direction.E
        assert mountain_by_name("午").direction is Direction.S
        assert mountain_by_name("酉").direction is Direction.W
        assert mountain_by_name("乾").trigram == "乾"
        assert mountain_by_name("坤").trigram == "坤"

    def test_unknown_mountain(self):
        with pytest.raises(ValueError):
            mountain_by_name("X")


class TestResolveMountain:

    def test_north(self):
        m = resolve_mountain(0)
        assert m.name == "子"
        assert m.sitting == "午"
        assert m.trigram == "坎"
        assert m.direction is Direction.N

    def test_south(self):
        m = resolve_mountain(180)
        assert (m.name, m.sitting, m.trigram) == ("午", "子", "離")

    @pytest.mark.parametrize("heading,name", [
        (7.4999, "子"),
        (7.5, "癸"),
        (352.5, "子"),
        (352.4999, "壬"),
        (337.5, "壬"),
        (45, "艮"),
        (135, "巽"),
        (225, "坤"),
        (315, "乾"),
        (359.9999, "子"),
    ])
    def test_boundaries(self, heading, name):
        assert resolve_mountain(heading).name == name

    @pytest.mark.parametrize("heading", [-10, 12.3, 97.5, 181, 299.99, 344.0])
    @pytest.mark.parametrize("k", [-3, -1, 1, 2, 5])
    def test_periodic(self, heading, k):
        assert resolve_mountain(heading) == resolve_mountain(heading + 360 * k)

    def test_negative_heading(self):
        assert resolve_mountain(-10).name == "壬"
        assert resolve_mountain(-90).name == "酉"

    def test_arcs_partition_circle(self):
        step = 0.25
        h = 0.0
        while h < 360.0:
            matches = [m for m in MOUNTAINS if m.contains(h)]
            assert len(matches) == 1, h
            h += step

    def test_nan_falls_back_to_north(self):
        assert find_mountain(float("nan")) is None
        assert resolve_mountain(float("nan")) is NORTH_MOUNTAIN

    def test_repeatable(self):
        assert resolve_mountain(123.4) == resolve_mountain(123.4)


def test_normalize_heading():
    assert normalize_heading(-90) == 270.0
    assert normalize_heading(720) == 0.0
    assert normalize_heading(-1e-17) == 0.0
    assert 0.0 <= normalize_heading(-0.0001) < 360.0


def test_facing_label_and_dict():
    m = resolve_mountain(0)
    assert facing_label(m) == "坐午向子"
    data = m.to_dict()
    assert data["name"] == "子"
    assert data["sitting"] == "午"
    assert data["direction"] == "N"
    assert data["trigram"] == "坎"
    assert data["label"] == "坐午向子"
