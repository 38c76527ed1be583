from factories import C, D, H, S, build_state, down, up

from klondike.deck import deal_new_game
from klondike.moves import (
    Selection,
    attempt_move,
    auto_move_to_foundation,
    draw_from_stock,
    flip_tableau_top,
    legal_moves,
    move_cards,
    selection_at,
)
from klondike.piles import STOCK, WASTE, foundation, tableau


def test_king_moves_to_empty_column_but_queen_does_not():
    state = build_state(tableau=[[], [down(D, 9), up(S, 13)], [up(H, 12)]])

    moved = attempt_move(state, selection_at(state, tableau(1)), tableau(0))
    assert moved is not None
    assert moved.tableau[0] == (up(S, 13),)
    moved.validate()

    assert attempt_move(state, selection_at(state, tableau(2)), tableau(0)) is None


def test_ace_from_waste_to_empty_foundation_but_not_two():
    state = build_state(waste=[up(H, 1)])
    moved = attempt_move(state, selection_at(state, WASTE), foundation(0))
    assert moved is not None
    assert moved.foundations[0] == (up(H, 1),)
    assert moved.waste == state.waste[:-1]

    state = build_state(waste=[up(H, 2)])
    assert attempt_move(state, selection_at(state, WASTE), foundation(0)) is None


def test_three_card_sequence_moves_onto_red_eight():
    state = build_state(
        tableau=[
            [down(D, 9), up(C, 7), up(H, 6), up(S, 5)],
            [up(D, 8)],
        ]
    )
    moved = attempt_move(state, selection_at(state, tableau(0), 1), tableau(1))
    assert moved is not None
    assert moved.tableau[1] == (up(D, 8), up(C, 7), up(H, 6), up(S, 5))
    # The exposed nine is turned face-up.
    assert moved.tableau[0] == (up(D, 9),)
    moved.validate()


def test_sub_sequence_moves_onto_another_valid_target():
    state = build_state(
        tableau=[
            [down(D, 9), up(C, 7), up(H, 6), up(S, 5)],
            [up(D, 8)],
            [up(S, 7)],
        ]
    )
    moved = attempt_move(state, selection_at(state, tableau(0), 2), tableau(2))
    assert moved is not None
    assert moved.tableau[2] == (up(S, 7), up(H, 6), up(S, 5))
    assert moved.tableau[0] == (down(D, 9), up(C, 7))


def test_emptying_a_column_exposes_nothing():
    state = build_state(tableau=[[up(S, 5)], [up(H, 6)]])
    moved = attempt_move(state, selection_at(state, tableau(0)), tableau(1))
    assert moved is not None
    assert moved.tableau[0] == ()
    assert moved.tableau[1] == (up(H, 6), up(S, 5))


def test_sequence_must_reach_top_of_column():
    state = build_state(tableau=[[up(C, 7), up(H, 6), up(S, 9)], [up(D, 8)]])
    assert attempt_move(state, selection_at(state, tableau(0), 0), tableau(1)) is None


def test_foundation_accepts_only_a_single_card():
    state = build_state(tableau=[[up(H, 2), up(S, 1)], [up(H, 1)]], foundations=[[]])
    assert attempt_move(state, selection_at(state, tableau(0), 0), foundation(0)) is None
    assert attempt_move(state, selection_at(state, tableau(0), 1), foundation(0)) is not None


def test_stale_and_invalid_selections_are_rejected():
    state = build_state(waste=[up(H, 1)], tableau=[[up(C, 7)], [up(D, 8)]])

    stale = Selection(card=up(S, 1), source=WASTE)
    assert attempt_move(state, stale, foundation(0)) is None

    wrong_index = Selection(card=up(C, 7), source=tableau(0), index=3)
    assert attempt_move(state, wrong_index, tableau(1)) is None

    top = selection_at(state, tableau(0))
    assert attempt_move(state, top, tableau(0)) is None
    assert attempt_move(state, top, WASTE) is None
    assert attempt_move(state, Selection(card=state.stock[-1], source=STOCK), tableau(1)) is None


def test_foundation_card_can_return_to_tableau():
    state = build_state(foundations=[[up(S, 1), up(S, 2)]], tableau=[[up(H, 3)]])
    moved = attempt_move(state, selection_at(state, foundation(0)), tableau(0))
    assert moved is not None
    assert moved.foundations[0] == (up(S, 1),)
    assert moved.tableau[0] == (up(H, 3), up(S, 2))


def test_move_cards_preserves_order_and_source_removal():
    state = build_state(tableau=[[up(C, 7), up(H, 6)], [up(D, 8)]])
    sequence = [up(C, 7), up(H, 6)]
    moved = move_cards(state, Selection(card=up(C, 7), source=tableau(0), index=0), tableau(1), sequence)
    assert moved.tableau[0] == ()
    assert moved.tableau[1] == (up(D, 8), up(C, 7), up(H, 6))


def test_draw_moves_top_stock_card_face_up_to_waste():
    state = deal_new_game(seed=5)
    drawn = draw_from_stock(state)
    assert drawn.waste == (state.stock[-1].flipped(True),)
    assert drawn.stock == state.stock[:-1]
    drawn.validate()


def test_drawing_from_empty_stock_recycles_waste():
    state = deal_new_game(seed=5)
    first_drawn = state.stock[-1]
    for _ in range(24):
        state = draw_from_stock(state)
    assert state.stock == ()
    assert len(state.waste) == 24
    waste = state.waste

    recycled = draw_from_stock(state)
    assert recycled.waste == ()
    assert recycled.stock == tuple(card.flipped(False) for card in reversed(waste))
    assert not any(card.face_up for card in recycled.stock)
    assert recycled.stock[-1].id == first_drawn.id
    recycled.validate()


def test_flip_tableau_top_only_turns_face_down_tops():
    state = build_state(tableau=[[up(H, 5), down(C, 9)], [up(H, 4)]])
    flipped = flip_tableau_top(state, 0)
    assert flipped is not None
    assert flipped.tableau[0] == (up(H, 5), up(C, 9))
    assert flip_tableau_top(state, 1) is None
    assert flip_tableau_top(state, 2) is None


def test_auto_move_picks_first_foundation_that_fits():
    state = build_state(foundations=[[up(H, 1)]], waste=[up(H, 2)], tableau=[[up(S, 1)], [up(C, 9)]])
    moved = auto_move_to_foundation(state, selection_at(state, WASTE))
    assert moved is not None and moved.foundations[0] == (up(H, 1), up(H, 2))

    moved = auto_move_to_foundation(state, selection_at(state, tableau(0)))
    assert moved is not None and moved.foundations[1] == (up(S, 1),)

    assert auto_move_to_foundation(state, selection_at(state, tableau(1))) is None


def test_legal_moves_are_all_accepted():
    state = build_state(
        waste=[up(H, 1)],
        tableau=[[down(D, 9), up(C, 7), up(H, 6)], [up(D, 8)], [up(S, 13)]],
    )
    moves = legal_moves(state)
    pairs = {(str(selection.source), selection.index, str(destination)) for selection, destination in moves}
    assert ("waste", 0, "foundation-0") in pairs
    assert ("tableau-0", 1, "tableau-1") in pairs
    assert ("tableau-2", 0, "tableau-3") in pairs
    for selection, destination in moves:
        result = attempt_move(state, selection, destination)
        assert result is not None
        result.validate()
