import logging

import pytest

from tshresults.exceptions import (
    BoardMismatchException,
    MissingRecordException,
    RoundCountException,
    StartMismatchException,
)
from tshresults.models.result import CanonicalResult
from tshresults.reconcile.reconciler import PairingReconciler
from tshresults.report.ledger import Ledger


def _build_ledger(rounds):
    """Build a ledger from {round: {player_id: (name, opp, score, board, start)}}."""
    ledger = Ledger()
    for round_number, players in rounds.items():
        for player_id, (name, opponent, score, board, start) in players.items():
            record = ledger.slot(round_number, player_id, name)
            record.opponent = opponent
            record.score = score
            record.board = board
            record.start = start
    return ledger


def test_two_players_make_one_result():
    ledger = _build_ledger(
        {1: {1: ("Ann Smith", "2", 1, 5, 1), 2: ("Bob Jones", "1", 0, 5, 2)}}
    )

    report = PairingReconciler().reconcile(ledger, "A")

    assert report.results == [CanonicalResult("A", 1, "Ann Smith", 1, "Bob Jones", 0)]
    assert report.rounds[0].match_count == 1
    assert report.rounds[0].bye_count == 0
    assert report.warnings == []


def test_replier_listed_first_is_swapped():
    ledger = _build_ledger(
        {1: {1: ("Ann Smith", "2", 380, 3, 2), 2: ("Bob Jones", "1", 420, 3, 1)}}
    )

    (result,) = PairingReconciler().reconcile(ledger, "A").results

    assert (result.player1, result.score1) == ("Bob Jones", 420)
    assert (result.player2, result.score2) == ("Ann Smith", 380)


@pytest.mark.parametrize("opponent", ["0", "bye"])
def test_bye_produces_no_result(opponent):
    ledger = _build_ledger(
        {
            1: {
                1: ("Ann Smith", "2", 400, 1, 1),
                2: ("Bob Jones", "1", 350, 1, 2),
                3: ("Cy Young", opponent, 50, 0, 0),
            }
        }
    )

    report = PairingReconciler().reconcile(ledger, "A")

    assert len(report.results) == 1
    assert "Cy Young" not in (report.results[0].player1, report.results[0].player2)
    assert report.rounds[0].bye_count == 1
    assert report.rounds[0].is_consistent


def test_board_mismatch_is_fatal():
    ledger = _build_ledger(
        {1: {1: ("Ann Smith", "2", 1, 5, 1), 2: ("Bob Jones", "1", 0, 6, 2)}}
    )

    with pytest.raises(BoardMismatchException):
        PairingReconciler().reconcile(ledger, "A")


@pytest.mark.parametrize("starts", [(1, 1), (2, 2), (1, 3), (0, 0)])
def test_start_mismatch_is_fatal(starts):
    ledger = _build_ledger(
        {
            1: {
                1: ("Ann Smith", "2", 1, 5, starts[0]),
                2: ("Bob Jones", "1", 0, 5, starts[1]),
            }
        }
    )

    with pytest.raises(StartMismatchException):
        PairingReconciler().reconcile(ledger, "A")


def test_missing_player_slot_is_fatal():
    ledger = _build_ledger(
        {1: {1: ("Ann Smith", "0", 50, 0, 0), 3: ("Cy Young", "0", 50, 0, 0)}}
    )

    with pytest.raises(MissingRecordException):
        PairingReconciler().reconcile(ledger, "A")


def test_unknown_opponent_is_fatal():
    ledger = _build_ledger(
        {1: {1: ("Ann Smith", "4", 1, 5, 1), 2: ("Bob Jones", "0", 0, 0, 0)}}
    )

    with pytest.raises(MissingRecordException):
        PairingReconciler().reconcile(ledger, "A")


def test_results_are_round_major_then_player_order():
    ledger = _build_ledger(
        {
            1: {
                1: ("P1", "2", 1, 1, 1),
                2: ("P2", "1", 0, 1, 2),
                3: ("P3", "4", 1, 2, 2),
                4: ("P4", "3", 0, 2, 1),
            },
            2: {
                1: ("P1", "3", 1, 1, 1),
                2: ("P2", "4", 0, 2, 1),
                3: ("P3", "1", 1, 1, 2),
                4: ("P4", "2", 0, 2, 2),
            },
        }
    )

    report = PairingReconciler().reconcile(ledger, "A")

    assert [(r.round_number, r.player1, r.player2) for r in report.results] == [
        (1, "P1", "P2"),
        (1, "P4", "P3"),
        (2, "P1", "P3"),
        (2, "P2", "P4"),
    ]
    assert all(tally.is_consistent for tally in report.rounds)


def test_every_player_appears_once_per_round():
    ledger = _build_ledger(
        {
            1: {
                1: ("P1", "3", 1, 1, 1),
                2: ("P2", "0", 0, 0, 0),
                3: ("P3", "1", 0, 1, 2),
                4: ("P4", "5", 1, 2, 1),
                5: ("P5", "4", 0, 2, 2),
            }
        }
    )

    report = PairingReconciler().reconcile(ledger, "A")

    seen = [name for r in report.results for name in (r.player1, r.player2)]
    assert sorted(seen) == ["P1", "P3", "P4", "P5"]
    tally = report.rounds[0]
    assert 2 * tally.match_count + tally.bye_count == 5


def _one_sided_ledger():
    # P3 names P1 as opponent but P1 is already paired with P2
    return _build_ledger(
        {
            1: {
                1: ("P1", "2", 1, 1, 1),
                2: ("P2", "1", 0, 1, 2),
                3: ("P3", "1", 0, 1, 2),
            }
        }
    )


def test_count_mismatch_only_warns(caplog):
    caplog.set_level(logging.WARNING, logger="tshresults")

    report = PairingReconciler().reconcile(_one_sided_ledger(), "A")

    assert len(report.results) == 1
    assert len(report.warnings) == 1
    assert "Round 1, found 1 matches and 0 byes but expected 3 players" in caplog.text


def test_count_mismatch_is_fatal_in_strict_mode():
    with pytest.raises(RoundCountException):
        PairingReconciler(strict_rounds=True).reconcile(_one_sided_ledger(), "A")


def test_empty_ledger_gives_empty_report():
    report = PairingReconciler().reconcile(Ledger(), "A")
    assert report.results == []
    assert report.rounds == []
