"""Tests pour l'application des intentions de contrôle à une session."""

import logging

from edgedrop.app.controls import Intent, apply_intent
from edgedrop.app.session import GameSession, Mode


def test_plus_offset_is_oriented_by_edge():
    session = GameSession(4, seed=1)
    session.next_slot = 3  # bord haut, seconde moitié

    assert apply_intent(session, Intent.PLUS_OFFSET) is True
    assert session.offset == -1
    assert session.drop() == 2

    # Déjà en butée
    assert apply_intent(session, Intent.PLUS_OFFSET) is False
    assert session.offset == -1


def test_minus_offset_wraps_at_perimeter_start():
    session = GameSession(4, seed=1)
    session.next_slot = 0
    assert apply_intent(session, Intent.MINUS_OFFSET) is True
    assert session.drop() == 15


def test_plus_on_left_edge_second_half():
    session = GameSession(4, seed=1)
    session.next_slot = 12
    apply_intent(session, Intent.PLUS_OFFSET)
    assert session.offset == 1
    assert session.drop() == 13


def test_place_and_rotate_intents():
    session = GameSession(3, seed=4)
    assert apply_intent(session, Intent.PLACE) is True
    assert len(session.placement_history) == 1

    assert apply_intent(session, Intent.ROTATE_RIGHT) is True
    assert apply_intent(session, Intent.ROTATE_RIGHT) is True
    assert apply_intent(session, Intent.ROTATE_LEFT) is True
    assert session.rotation == 1


def test_rank_boost_intent_refused_at_rank_one():
    session = GameSession(3)
    assert apply_intent(session, Intent.RANK_BOOST) is False


def test_restart_intent_ignored_while_playing():
    session = GameSession(3, seed=4)
    session.place()
    assert apply_intent(session, Intent.RESTART) is False
    assert session.placement_history != ()


def test_game_over_then_restart():
    session = GameSession(2, seed=4, clearing=False)
    for _ in range(2):
        session.next_slot = 1
        assert apply_intent(session, Intent.PLACE) is True

    session.next_slot = 1
    assert apply_intent(session, Intent.PLACE) is True
    assert session.mode is Mode.GAME_OVER

    assert apply_intent(session, Intent.PLACE) is False
    assert apply_intent(session, Intent.PLUS_OFFSET) is False

    assert apply_intent(session, Intent.RESTART) is True
    assert session.mode is Mode.PLAYING
    assert session.placement_history == ()


def test_print_history_logs_placements(caplog):
    session = GameSession(3, seed=4)
    session.next_slot = 2
    session.place()

    with caplog.at_level(logging.DEBUG, logger="edgedrop.app.controls"):
        assert apply_intent(session, Intent.PRINT_HISTORY) is False

    assert "[2]" in caplog.text
