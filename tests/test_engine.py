import pytest

import config
from core.engine import GameEngine
from core.models import GameState, SupporterData


def _engine(rng, total_votes=100_000, supporters=None, **kwargs) -> GameEngine:
    return GameEngine(total_votes=total_votes, supporters=supporters or [], rng=rng, **kwargs)


def test_no_tick_before_first_interval(fixed_rng):
    engine = _engine(fixed_rng)
    engine.step(0.5)

    assert engine.ticks == 0
    assert engine.ledger.opponent_votes == 0


def test_frames_fire_one_tick_per_interval(fixed_rng):
    engine = _engine(fixed_rng)
    for _ in range(8):
        engine.step(0.25)

    assert engine.ticks == 2
    # 10 * 1s then 10 * 2s
    assert engine.ledger.opponent_votes == 30


def test_long_step_catches_up_every_missed_tick(fixed_rng):
    engine = _engine(fixed_rng)
    engine.step(3.0)

    assert engine.ticks == 3
    # each catch-up tick reads the time it was scheduled for: 10 * (1 + 2 + 3)
    assert engine.ledger.opponent_votes == 60
    assert engine.clock.elapsed == 3.0


def test_one_long_step_matches_many_short_steps(fixed_rng):
    long_run = _engine(fixed_rng)
    long_run.step(12.9)
    short_run = _engine(fixed_rng)
    for _ in range(129):
        short_run.step(0.1)

    assert long_run.ticks == short_run.ticks == 12
    assert long_run.ledger.opponent_votes == short_run.ledger.opponent_votes == 10 * sum(range(1, 13))
    assert long_run.clock.time_passed == 12


def test_supporter_credit_runs_before_opponent(fixed_rng):
    rally = SupporterData(name="Rally", cost=0, votes_per_second=5, max_count=1)
    engine = _engine(fixed_rng, total_votes=10, supporters=[rally])
    assert engine.buy("Rally")[0] is True

    logs = engine.step(1.0)

    assert engine.state == GameState.WON
    assert engine.ledger.player_votes == 5
    assert engine.ledger.opponent_votes == 10
    assert logs == ["You won the game! (5 of 10 votes)"]


def test_game_over_is_announced_once(fixed_rng):
    engine = _engine(fixed_rng, total_votes=20)
    first = engine.step(1.0)
    second = engine.step(1.0)

    assert engine.state == GameState.LOST
    assert len(first) == 1 and first[0].startswith("You lost the game!")
    assert second == []
    # the economy keeps running after the game ends
    assert engine.ledger.opponent_votes == 10 + 20


def test_click_credits_click_votes(fixed_rng):
    engine = _engine(fixed_rng, total_votes=100, click_votes=1)
    for _ in range(49):
        engine.click()
        assert engine.game_over_logs() == []
    votes = engine.click()
    logs = engine.game_over_logs()

    assert votes == 50
    assert engine.state == GameState.WON
    assert logs and logs[0].startswith("You won the game!")


def test_buy_unknown_name(fixed_rng):
    engine = _engine(fixed_rng)
    success, msg = engine.buy("Nobody")

    assert success is False
    assert "Unknown supporter" in msg


def test_snapshot_reports_supporters(fixed_rng, canvasser):
    engine = _engine(fixed_rng, supporters=[canvasser])
    for _ in range(12):
        engine.click()
    engine.buy("Canvasser")
    engine.step(1.5)

    snap = engine.snapshot()
    assert snap.total_votes == 100_000
    assert snap.player_votes == 2 + 2
    assert snap.opponent_votes == 10
    assert snap.time_passed == 1
    assert snap.state == GameState.CONTINUE
    assert snap.votes_per_second == 2
    view = snap.supporters[0]
    assert (view.name, view.count, view.max_count, view.cost) == ("Canvasser", 1, 3, 10)
    assert view.affordable is False


def test_custom_first_tick_delay(fixed_rng):
    engine = _engine(fixed_rng, tick_interval=2.0, first_tick_delay=0.5)
    engine.step(0.5)
    assert engine.ticks == 1
    engine.step(2.0)
    assert engine.ticks == 2


def test_non_positive_interval_is_rejected(fixed_rng):
    with pytest.raises(ValueError):
        _engine(fixed_rng, tick_interval=0)


def test_from_config_uses_catalog(fixed_rng):
    engine = GameEngine.from_config(rng=fixed_rng)

    assert engine.ledger.total_votes == config.TOTAL_VOTES
    assert [s.name for s in engine.supporters.supporters] == [s.name for s in config.SUPPORTERS]
    assert engine.opponent.vote_range == config.OPPONENT_VOTE_RANGE
