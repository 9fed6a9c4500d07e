import random

from xo import (
    GameState,
    Player,
    Position,
    audit_all_positions,
    engine_agent,
    eval_self_play,
    eval_vs_random,
    play_game,
    random_agent,
)


def test_random_agent_plays_empty_squares():
    agent = random_agent(random.Random(3))
    pos = Position.parse("xo.-xo.-...")
    for _ in range(20):
        assert pos.square_at(agent(pos)) is None


def test_play_game_from_start_position():
    state, moves = play_game(engine_agent, engine_agent, start=Position.parse("xx.-oo.-..."))
    assert state == GameState.X_WINS
    assert moves == [2]


def test_play_game_does_not_touch_start():
    start = Position.parse("x..-...-...")
    play_game(engine_agent, engine_agent, start=start)
    assert start == Position.parse("x..-...-...")


def test_engine_never_loses_to_random():
    results = eval_vs_random(games=20, seed=1)
    assert results["games"] == 20
    assert results["engine_l"] == 0.0
    assert results["engine_w"] + results["engine_d"] == 1.0


def test_random_vs_random_finishes():
    rng = random.Random(0)
    state, moves = play_game(random_agent(rng), random_agent(rng))
    assert state.is_over
    assert 5 <= len(moves) <= 9


def test_self_play_is_a_draw():
    state, moves = eval_self_play()
    assert state == GameState.DRAW
    assert len(moves) == 9
    assert moves[0] == 0


def test_audit_all_positions():
    counts = audit_all_positions()
    assert counts["positions"] == 4520
    assert counts["wins"] + counts["draws"] + counts["losses"] == 4520
    assert counts["wins"] > 0
    assert counts["losses"] > 0


def test_play_game_asks_the_side_to_move():
    seen = []

    def recording_agent(pos):
        seen.append(pos.next_player())
        return engine_agent(pos)

    play_game(recording_agent, random_agent(random.Random(0)))
    assert set(seen) == {Player.X}
