import io

import pytest

from solong.game import (
    Direction,
    Game,
    GameOver,
    Outcome,
    direction_for_key,
    find_player,
)

CORRIDOR = ["111111", "1P0CE1", "111111"]
ENEMY_MAP = ["1111111", "1MP0CE1", "1111111"]


def make_game(rows=CORRIDOR, enemies=False):
    out = io.StringIO()
    return Game(rows, enemies, out), out


@pytest.mark.parametrize(
    "key, expected",
    [
        (13, Direction.UP),
        (126, Direction.UP),
        (0, Direction.LEFT),
        (123, Direction.LEFT),
        (1, Direction.DOWN),
        (125, Direction.DOWN),
        (2, Direction.RIGHT),
        (124, Direction.RIGHT),
        (53, None),
        (99, None),
    ],
)
def test_direction_for_key(key, expected):
    assert direction_for_key(key) is expected


def test_find_player():
    assert find_player(CORRIDOR) == (1, 1)
    assert find_player(["111", "101", "111"]) is None


def test_initial_state():
    game, _ = make_game()
    assert game.coins_total == 1
    assert game.coins_collected == 0
    assert game.moves == 0
    assert not game.exit_open()
    assert game.rows() == CORRIDOR


def test_step_onto_floor_reports_move():
    game, out = make_game()
    assert game.move(Direction.RIGHT) is True
    assert game.player_position() == (1, 2)
    assert game.moves == 1
    assert out.getvalue() == "move :1\n"
    assert game.rows()[1] == "10PCE1"


def test_wall_blocks_movement():
    game, out = make_game()
    assert game.move(Direction.UP) is False
    assert game.move(Direction.LEFT) is False
    assert game.rows() == CORRIDOR
    assert game.moves == 0
    assert out.getvalue() == ""


def test_collect_coin_opens_exit():
    game, _ = make_game()
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.coins_collected == 1
    assert game.exit_open()


def test_closed_exit_blocks_without_enemies():
    rows = ["1111111", "1PE0C01", "1111111"]
    game, _ = make_game(rows)
    assert game.move(Direction.RIGHT) is False
    assert game.rows() == rows


def test_closed_exit_is_entered_with_enemies():
    rows = ["1111111", "1PE0C01", "1111111"]
    game, out = make_game(rows, enemies=True)
    assert game.move(Direction.RIGHT) is True
    assert game.player_position() == (1, 2)
    assert "E" not in "".join(game.rows())
    assert out.getvalue() == ""


def test_win_message():
    game, _ = make_game()
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    with pytest.raises(GameOver) as info:
        game.move(Direction.RIGHT)
    assert info.value.outcome is Outcome.WON
    assert info.value.message == "YOU WIN THE GAME <3"


def test_win_message_with_enemies():
    game, _ = make_game(enemies=True)
    game.handle_key(2)
    game.handle_key(2)
    with pytest.raises(GameOver) as info:
        game.handle_key(2)
    assert info.value.outcome is Outcome.WON
    assert info.value.message == "YOU WIN THE GAME"


def test_walking_into_enemy_loses():
    game, _ = make_game(ENEMY_MAP, enemies=True)
    with pytest.raises(GameOver) as info:
        game.move(Direction.LEFT)
    assert info.value.outcome is Outcome.LOST
    assert info.value.message == "YOU LOSE THE GAME"


def test_enemy_tile_blocks_without_enemies():
    game, _ = make_game(ENEMY_MAP)
    assert game.move(Direction.LEFT) is False
    assert game.rows() == ENEMY_MAP


def test_escape_quits():
    game, _ = make_game()
    with pytest.raises(GameOver) as info:
        game.handle_key(53)
    assert info.value.outcome is Outcome.QUIT
    assert info.value.message == "BAY BAY"


def test_facing_follows_horizontal_keys():
    game, _ = make_game()
    assert game.facing is Direction.RIGHT
    game.handle_key(0)
    assert game.facing is Direction.LEFT
    game.handle_key(13)
    assert game.facing is Direction.LEFT
    game.handle_key(2)
    assert game.facing is Direction.RIGHT


def test_unknown_key_does_nothing():
    game, _ = make_game()
    assert game.handle_key(99) is False
    assert game.rows() == CORRIDOR


def test_missing_player_ends_game():
    game, _ = make_game(["111", "101", "111"], enemies=True)
    with pytest.raises(GameOver) as info:
        game.move(Direction.UP)
    assert info.value.outcome is Outcome.LOST


def test_move_count_accumulates_in_output():
    rows = ["1111111", "1P00CE1", "1111111"]
    game, out = make_game(rows)
    game.move(Direction.RIGHT)
    game.move(Direction.LEFT)
    game.move(Direction.RIGHT)
    assert game.moves == 3
    assert out.getvalue().splitlines()[-1] == f"move :{game.moves}"