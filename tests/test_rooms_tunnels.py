import pytest

from delve.world import Grid, Rect, carve_room
from delve.world.rooms import overlaps_any
from delve.world.tunnels import carve_h_tunnel, carve_v_tunnel, connect_centers


def test_rect_new_and_center():
    r = Rect.new(2, 3, 4, 5)
    assert (r.x1, r.y1, r.x2, r.y2) == (2, 3, 6, 8)
    assert r.center == (4, 5)
    # integer truncation
    assert Rect.new(1, 1, 6, 7).center == (4, 4)


def test_touching_rects_intersect():
    a = Rect.new(0, 0, 5, 5)
    b = Rect.new(5, 0, 5, 5)
    c = Rect.new(6, 0, 5, 5)
    assert a.intersects(b) and b.intersects(a)
    assert not a.intersects(c) and not c.intersects(a)
    assert overlaps_any(b, [c, a])
    assert not overlaps_any(c, [a])


def test_carve_room_leaves_boundary_ring():
    g = Grid(10, 10)
    room = Rect.new(1, 1, 5, 4)
    carve_room(g, room)
    assert g.count_empty() == 4 * 3
    for x in range(2, 6):
        for y in range(2, 5):
            assert not g.tile(x, y).blocked
    assert g.tile(1, 3).blocked
    assert g.tile(6, 3).blocked
    assert g.tile(3, 1).blocked
    assert g.tile(3, 5).blocked


def test_non_intersecting_rooms_never_touch():
    g = Grid(20, 10)
    a, c = Rect.new(0, 0, 5, 5), Rect.new(6, 0, 5, 5)
    carve_room(g, a)
    carve_room(g, c)
    a_cells = set(a.interior())
    for x, y in c.interior():
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                assert (x + dx, y + dy) not in a_cells


@pytest.mark.parametrize("x1,x2", [(2, 7), (7, 2)])
def test_h_tunnel_inclusive_and_order_independent(x1, x2):
    g = Grid(10, 5)
    carve_h_tunnel(g, x1, x2, 3)
    assert g.count_empty() == 6
    assert all(not g.tile(x, 3).blocked for x in range(2, 8))


@pytest.mark.parametrize("y1,y2", [(1, 4), (4, 1)])
def test_v_tunnel_inclusive_and_order_independent(y1, y2):
    g = Grid(5, 6)
    carve_v_tunnel(g, y1, y2, 2)
    assert g.count_empty() == 4
    assert all(not g.tile(2, y).blocked for y in range(1, 5))


def test_connect_centers_horizontal_first(fixed_rng):
    g = Grid(12, 10)
    assert connect_centers(g, (2, 2), (8, 6), fixed_rng(0.1)) is True
    assert not g.tile(5, 2).blocked
    assert not g.tile(8, 4).blocked
    assert g.tile(2, 4).blocked
    assert g.count_empty() == 7 + 4


def test_connect_centers_vertical_first(fixed_rng):
    g = Grid(12, 10)
    assert connect_centers(g, (2, 2), (8, 6), fixed_rng(0.9)) is False
    assert not g.tile(2, 4).blocked
    assert not g.tile(5, 6).blocked
    assert g.tile(5, 2).blocked
    assert g.count_empty() == 5 + 6
