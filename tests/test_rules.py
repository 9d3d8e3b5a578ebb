import numpy as np
import pytest

from mancala.core import (
    GameConfig,
    IllegalMove,
    InvalidConfiguration,
    Player,
    Position,
    UndefinedScore,
    apply_move,
    enumerate_legal_moves,
    initialize_position,
)


def random_playout(position: Position, rng: np.random.Generator):
    positions = [position]
    while not position.finished():
        position = position.play(int(rng.choice(position.legal_moves())))
        positions.append(position)
    return positions


def test_initial_legal_moves():
    position = initialize_position()
    assert position.legal_moves() == [0, 1, 2, 3, 4, 5]
    assert position.turn == Player.RED
    assert position.stores == (0, 0)
    assert not position.finished()


def test_player_opponent():
    assert Player.RED.opponent == Player.BLUE
    assert Player.BLUE.opponent == Player.RED


def test_sowing_moves_stones_to_following_bowls():
    position = Position.initial(3, 2)
    next_position = position.play(0)
    assert next_position.bowls == (0, 3, 3, 2, 2, 2)
    assert next_position.stores == (0, 0)
    assert next_position.turn == Player.BLUE


def test_play_returns_new_position_and_leaves_receiver_untouched():
    position = Position.initial(3, 2)
    position.play(0)
    assert position == Position.initial(3, 2)


def test_last_stone_in_own_store_grants_extra_turn():
    next_position = Position.initial(3, 3).play(0)
    assert next_position.bowls == (0, 4, 4, 3, 3, 3)
    assert next_position.stores == (1, 0)
    assert next_position.turn == Player.RED


def test_sowing_skips_opponent_store_for_red():
    position = Position.from_bowls([0, 6, 1, 1])
    next_position = position.play(1)
    assert next_position.bowls == (1, 1, 2, 2)
    assert next_position.stores == (2, 0)
    assert next_position.turn == Player.RED


def test_sowing_skips_opponent_store_for_blue():
    position = Position.from_bowls([1, 1, 0, 6], turn=Player.BLUE)
    next_position = position.play(3)
    assert next_position.bowls == (2, 2, 1, 1)
    assert next_position.stores == (0, 2)
    assert next_position.turn == Player.BLUE


def test_emptied_bowl_is_sown_into_on_a_full_lap():
    next_position = Position.initial(1, 8).play(0)
    assert next_position.bowls == (2, 11)
    assert next_position.stores == (3, 0)
    assert next_position.turn == Player.BLUE


def test_capture_from_own_empty_bowl():
    position = Position.from_bowls([1, 0, 1, 0, 5, 2])
    next_position = position.play(0)
    assert next_position.bowls == (0, 0, 1, 0, 0, 2)
    assert next_position.stores == (6, 0)
    assert next_position.turn == Player.BLUE


def test_no_capture_when_opposite_bowl_is_empty():
    position = Position.from_bowls([1, 0, 1, 2, 0, 2])
    next_position = position.play(0)
    assert next_position.bowls == (0, 1, 1, 2, 0, 2)
    assert next_position.stores == (0, 0)


def test_landing_in_empty_opponent_bowl_and_terminal_sweep():
    position = Position.from_bowls([0, 0, 2, 0, 3, 3])
    final = position.play(2)
    assert final.bowls == (0, 0, 0, 0, 0, 0)
    assert final.stores == (1, 7)
    assert final.turn == Player.BLUE
    assert final.finished()
    assert final.score() == 6
    assert final.score_for(Player.RED) == -6


def test_finished_position_counts_remaining_stones_for_their_owner():
    position = Position.from_bowls([0, 0, 2, 2], stores=(5, 0))
    assert position.finished()
    assert position.legal_moves() == []
    assert position.score() == 1


def test_score_is_undefined_for_unfinished_positions():
    with pytest.raises(UndefinedScore):
        Position.initial(6, 4).score()


@pytest.mark.parametrize("bowl", [-1, 6, 12, "1", 1.0, True, None])
def test_malformed_bowl_index_is_rejected(bowl):
    with pytest.raises(IllegalMove):
        Position.initial(3, 4).play(bowl)


def test_opponent_and_empty_bowls_are_rejected():
    position = Position.from_bowls([0, 2, 2, 2])
    with pytest.raises(IllegalMove) as excinfo:
        position.play(2)
    assert excinfo.value.bowl == 2
    with pytest.raises(IllegalMove):
        position.play(0)
    with pytest.raises(ValueError):
        position.play(3)


def test_no_move_is_legal_on_a_finished_position():
    position = Position.from_bowls([0, 0, 1, 1], stores=(3, 3))
    for bowl in range(4):
        with pytest.raises(IllegalMove):
            position.play(bowl)


def test_functional_wrappers_match_methods():
    position = Position.from_bowls([1, 0, 3, 2], turn=Player.BLUE)
    assert enumerate_legal_moves(position) == [2, 3]
    assert enumerate_legal_moves(position, Player.RED) == [0]
    assert apply_move(position, 2) == position.play(2)


@pytest.mark.parametrize(
    "bowls, stones",
    [(0, 4), (-2, 4), (True, 4), (2.5, 4), (6, -1), (6, "4")],
)
def test_invalid_game_configuration_is_rejected(bowls, stones):
    with pytest.raises(InvalidConfiguration):
        GameConfig(bowls_per_side=bowls, stones_per_bowl=stones)


def test_game_config_builds_initial_position():
    config = GameConfig(bowls_per_side=4, stones_per_bowl=3)
    position = config.initial_position()
    assert position.bowls == (3,) * 8
    assert position.total_stones() == config.total_stones == 24


def test_zero_stones_game_is_finished_immediately():
    position = GameConfig(bowls_per_side=3, stones_per_bowl=0).initial_position()
    assert position.finished()
    assert position.score() == 0


@pytest.mark.parametrize("bowls", [[], [1, 2, 3], [1, -1]])
def test_from_bowls_rejects_malformed_boards(bowls):
    with pytest.raises(InvalidConfiguration):
        Position.from_bowls(bowls)


@pytest.mark.parametrize("bowls_per_side, stones", [(1, 8), (2, 3), (3, 4), (6, 4)])
def test_stones_are_conserved(bowls_per_side, stones):
    rng = np.random.default_rng(bowls_per_side * 100 + stones)
    expected = 2 * bowls_per_side * stones
    for _ in range(20):
        for position in random_playout(Position.initial(bowls_per_side, stones), rng):
            assert position.total_stones() == expected
            assert all(count >= 0 for count in position.bowls + position.stores)


def test_terminal_scores_are_zero_sum():
    rng = np.random.default_rng(7)
    for _ in range(50):
        final = random_playout(Position.initial(4, 3), rng)[-1]
        assert final.score_for(Player.RED) == -final.score_for(Player.BLUE)
        assert final.score() == final.score_for(final.turn)
        assert final.bowls == (0,) * 8


def test_legal_moves_empty_only_when_finished():
    rng = np.random.default_rng(3)
    for position in random_playout(Position.initial(3, 3), rng):
        assert (position.legal_moves() == []) == position.finished()


def test_single_bowl_game_regression():
    position = Position.initial(1, 8)
    played = []
    while not position.finished():
        (bowl,) = position.legal_moves()
        played.append((position.turn, bowl))
        position = position.play(bowl)

    assert [bowl for _, bowl in played] == [0, 1, 0, 1, 0, 0]
    assert [player for player, _ in played] == [
        Player.RED,
        Player.BLUE,
        Player.RED,
        Player.BLUE,
        Player.RED,
        Player.RED,
    ]
    assert position.stores == (8, 8)
    assert position.score() == 0


def test_render_shows_stores_and_turn():
    text = Position.from_bowls([1, 2, 3, 4], stores=(5, 6), turn=Player.BLUE).render()
    assert "turn: BLUE" in text
    assert " 4  3" in text
    assert " 1  2" in text
    assert str(Position.initial(2, 1)) == Position.initial(2, 1).render()
