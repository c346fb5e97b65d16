import pytest

from molegame.core import (DifficultyLevel, DifficultyPolicy, GAME_STOPPED, GameSession, RandomSource,
                           RoundScheduler, RoundState, SessionExpired, TargetSelector)


@pytest.fixture()
def session():
    return GameSession(difficulty=DifficultyLevel.EASY, remaining_time=5)


@pytest.fixture()
def stops():
    return []


@pytest.fixture()
def scheduler(session, locations, timers, stops):
    rng = RandomSource(21)
    return RoundScheduler(session, locations, timers, DifficultyPolicy(rng), TargetSelector(rng),
                          on_stop=lambda: stops.append(timers.now))


def visible(locations):
    return [loc for loc in locations if loc.visible]


def test_begin_round_shows_one_target_and_arms_hide(scheduler, locations, timers):
    handle = scheduler.begin_round()
    assert scheduler.state is RoundState.Showing
    assert visible(locations) == [scheduler.target]
    assert handle.due_ms == 1500
    assert scheduler.delay_ms == 1500


def test_hide_moves_to_a_new_target_while_time_remains(scheduler, locations, timers):
    scheduler.begin_round()
    first = scheduler.target
    timers.advance(1500)
    assert first.visible is False
    assert scheduler.state is RoundState.Showing
    assert scheduler.target is not first
    assert len(visible(locations)) == 1
    assert scheduler.rounds_played == 2


def test_hide_stops_once_time_is_out(scheduler, session, locations, timers, stops):
    scheduler.begin_round()
    session.remaining_time = 0
    timers.advance(1500)
    assert scheduler.state is RoundState.Stopped
    assert visible(locations) == []
    assert stops == [1500]


def test_begin_round_requires_time(scheduler, session):
    session.remaining_time = 0
    with pytest.raises(SessionExpired):
        scheduler.begin_round()


def test_game_over_dispatches_round_or_stop(scheduler, session, stops):
    handle = scheduler.game_over()
    assert handle is scheduler.handle
    scheduler.cancel()
    session.remaining_time = 0
    assert scheduler.game_over() == GAME_STOPPED
    assert scheduler.state is RoundState.Stopped
    assert len(stops) == 1


def test_cancel_prevents_late_toggle(scheduler, locations, timers, stops):
    scheduler.begin_round()
    target = scheduler.target
    scheduler.cancel()
    assert not target.visible
    timers.advance(5000)
    assert visible(locations) == []
    assert stops == []
    assert scheduler.state is RoundState.Stopped


def test_stale_hide_after_restart_is_ignored(scheduler, locations, timers):
    scheduler.begin_round()
    stale = scheduler.handle
    scheduler.reset()
    scheduler.begin_round()
    # fire the old callback by hand; it must not touch the new round
    stale.callback()
    assert scheduler.state is RoundState.Showing
    assert len(visible(locations)) == 1


def test_hard_rounds_use_random_delays(session, locations, timers):
    session.difficulty = DifficultyLevel.HARD
    rng = RandomSource(5)
    scheduler = RoundScheduler(session, locations, timers, DifficultyPolicy(rng), TargetSelector(rng),
                               on_stop=lambda: None)
    handle = scheduler.begin_round()
    assert 600 <= handle.due_ms <= 1200


def test_new_round_hides_the_previous_target_and_drops_its_timer(scheduler, locations, timers):
    first_handle = scheduler.begin_round()
    first = scheduler.target
    scheduler.begin_round()
    assert first_handle.cancelled
    assert not first.visible
    assert visible(locations) == [scheduler.target]
    timers.advance(1500)
    assert len(visible(locations)) == 1
    assert scheduler.rounds_played == 3
