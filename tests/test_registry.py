import pytest

from delve import EntityRegistry, InvariantError
from delve.models import Entity


def _orc(x=1, y=1):
    return Entity(x, y, "orc", True, "o", (0, 0, 0))


def test_ids_are_stable_and_sequential(player):
    reg = EntityRegistry(player)
    assert reg.player_id == 1
    a = reg.add(_orc())
    b = reg.add(_orc(2, 2))
    assert (a, b) == (2, 3)
    reg.remove(a)
    assert reg.get(b).pos == (2, 2)
    assert reg.get(1) is player


def test_player_cannot_be_removed(registry):
    with pytest.raises(InvariantError) as exc:
        registry.remove(registry.player_id)
    assert exc.value.code == "player_removed"


def test_carry_over_keeps_only_the_player(registry, player):
    registry.add(_orc())
    fresh = registry.carry_over()
    assert len(fresh) == 1
    assert fresh.player is player
    assert fresh.player_id == registry.player_id
    # ids keep increasing across levels
    assert fresh.add(_orc()) == 3


def test_membership_is_by_id(registry):
    eid = registry.add(_orc(4, 4))
    assert eid in registry
    assert registry.player_id in registry
    registry.remove(eid)
    assert eid not in registry
    assert len(registry) == 1
