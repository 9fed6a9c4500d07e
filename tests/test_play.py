import os
import sys

from xo import GameState, Player, Position
from xo.play import PlayConfig, engine_move, main, parse_args, play_interactive, user_move

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import eval as eval_script


def scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_user_move_reprompts(capsys):
    pos = Position.parse("x..-.o.-...")
    idx = user_move(pos, scripted("abc", "9", "4", "0", " 2 "))
    assert idx == 2
    assert pos.square_at(2) == Player.O
    out = capsys.readouterr().out
    assert "expected a valid unsigned integer" in out
    assert "expected number in range 0..8" in out
    assert "square at index 4 was occupied" in out
    assert "square at index 0 was occupied" in out


def test_engine_move_plays_best_move():
    pos = Position.parse("xx.-oo.-...")
    assert engine_move(pos) == 2
    assert pos.state() == GameState.X_WINS


def test_engine_wins_without_input(capsys):
    cfg = PlayConfig(engine=Player.X, board="xx.-oo.-...")
    state = play_interactive(cfg, read=scripted())
    assert state == GameState.X_WINS
    assert "X has won" in capsys.readouterr().out


def test_two_humans(capsys):
    cfg = PlayConfig(engine=None)
    state = play_interactive(cfg, read=scripted("0", "3", "1", "4", "2"))
    assert state == GameState.X_WINS


def test_hints(capsys):
    cfg = PlayConfig(engine=None, board="xx.-oo.-...", hints=True)
    state = play_interactive(cfg, read=scripted("2"))
    assert state == GameState.X_WINS
    assert "2:win" in capsys.readouterr().out


def test_parse_args():
    args = parse_args([])
    assert args.engine == "x"
    assert args.board == ""
    assert not args.hints
    args = parse_args(["--engine", "none", "--hints"])
    assert args.engine == "none"
    assert args.hints


def test_main_finished_board(capsys):
    main(["--board", "xox-xoo-oxx"])
    assert "draw" in capsys.readouterr().out


def test_eval_script_run(capsys):
    cfg = eval_script.EvalConfig(games=4, audit=False, progress=False)
    results = eval_script.run(cfg)
    assert results["self_play"] == "draw"
    assert results["vs_random"]["engine_l"] == 0.0
    assert "vs Random (4 games)" in capsys.readouterr().out
