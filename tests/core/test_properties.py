"""Property-based tests for the War engine."""

from random import Random

from hypothesis import given, settings, strategies as st

from core.cards import create_deck, shuffle_deck
from core.game import WarGame


def _zone_cards(game: WarGame) -> list:
    return (
        list(game.player_hand)
        + list(game.bot_hand)
        + list(game.deck)
        + list(game.discard_pile)
        + game.center_cards.cards()
    )


def _play_out(seed: int, picks: list[int]) -> WarGame:
    game = WarGame(rng=Random(seed))
    game.start_new_game()
    for pick in picks:
        if game.is_game_over:
            break
        game.play_card(game.player_hand[pick % len(game.player_hand)])
    return game


@given(seed=st.integers(min_value=0, max_value=10000))
def test_shuffle_is_permutation_property(seed: int) -> None:
    """Property: Shuffling keeps every card exactly once."""
    shuffled = shuffle_deck(create_deck(), Random(seed))
    assert len(shuffled) == 52
    assert set(shuffled) == set(create_deck())


@settings(max_examples=50)
@given(
    seed=st.integers(min_value=0, max_value=10000),
    picks=st.lists(st.integers(min_value=0, max_value=50), max_size=60),
)
def test_card_conservation_property(seed: int, picks: list[int]) -> None:
    """Property: All 52 cards stay in play, each exactly once."""
    game = _play_out(seed, picks)
    cards = _zone_cards(game)
    assert len(cards) == 52
    assert len(set(cards)) == 52


@settings(max_examples=50)
@given(
    seed=st.integers(min_value=0, max_value=10000),
    picks=st.lists(st.integers(min_value=0, max_value=50), max_size=60),
)
def test_score_and_log_property(seed: int, picks: list[int]) -> None:
    """Property: Every round adds one log line and at most one point."""
    game = _play_out(seed, picks)
    rounds = len(game.game_log)
    draws = sum(1 for line in game.game_log if line.startswith("Draw"))
    assert game.player_score + game.bot_score == rounds - draws
    assert len(game.player_hand) == len(game.bot_hand)


@settings(max_examples=25)
@given(seed=st.integers(min_value=0, max_value=10000))
def test_game_terminates_property(seed: int) -> None:
    """Property: Always playing the first card ends the game within 26 rounds."""
    game = WarGame(rng=Random(seed))
    game.start_new_game()
    rounds = 0
    while not game.is_game_over:
        game.play_card(game.player_hand[0])
        rounds += 1
        assert rounds <= 26

    assert game.winner is not None
