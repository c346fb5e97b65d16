import pytest

from molegame.core import GameSession, Location, RandomSource, TargetSelector, make_locations, toggle_visibility


def test_toggle_visibility_flips_and_restores():
    loc = Location(index=0)
    assert toggle_visibility(loc) is loc
    assert loc.visible
    toggle_visibility(loc)
    assert not loc.visible


def test_locations_compare_by_identity():
    a, b = Location(index=1), Location(index=1)
    assert a != b
    assert a == a


def test_choose_never_repeats_back_to_back():
    locations = make_locations(9)
    session = GameSession()
    selector = TargetSelector(RandomSource(11))
    previous = None
    for _ in range(500):
        chosen = selector.choose(locations, session)
        assert chosen is not previous
        assert session.last_location is chosen
        previous = chosen


def test_choose_alternates_with_two_locations():
    locations = make_locations(2)
    session = GameSession()
    selector = TargetSelector(RandomSource(0))
    picks = [selector.choose(locations, session).index for _ in range(10)]
    assert all(a != b for a, b in zip(picks, picks[1:]))


def test_choose_visits_every_location():
    locations = make_locations(9)
    session = GameSession()
    selector = TargetSelector(RandomSource(8))
    seen = {selector.choose(locations, session).index for _ in range(300)}
    assert seen == set(range(9))


def test_choose_rejects_empty_board():
    with pytest.raises(ValueError):
        TargetSelector().choose([], GameSession())


def test_hit_listeners_are_registered_once():
    loc = Location(index=0)
    hits = []
    listener = hits.append
    loc.add_hit_listener(listener)
    loc.add_hit_listener(listener)
    loc.hit()
    assert hits == [loc]
    loc.remove_hit_listener(listener)
    loc.hit()
    assert hits == [loc]


class CountingRandom(RandomSource):
    """Gives up after `limit` draws so an endless loop becomes an error."""

    def __init__(self, limit):
        super().__init__(0)
        self.limit = limit
        self.draws = 0

    def random_integer(self, low, high):
        self.draws += 1
        if self.draws > self.limit:
            raise RuntimeError("too many draws")
        return super().random_integer(low, high)


def test_single_location_keeps_sampling_after_first_pick():
    locations = make_locations(1)
    session = GameSession()
    rng = CountingRandom(limit=50)
    selector = TargetSelector(rng)
    assert selector.choose(locations, session) is locations[0]
    assert rng.draws == 1

    with pytest.raises(RuntimeError, match="too many draws"):
        selector.choose(locations, session)
    assert rng.draws == 51
    assert session.last_location is locations[0]
