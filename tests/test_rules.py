from factories import C, D, H, S, build_state, down, full_suit, up

from klondike.rules import can_place_on_foundation, can_place_on_tableau, is_won, moveable_sequence


def test_foundation_accepts_ace_on_empty_and_same_suit_successor():
    state = build_state(foundations=[[up(H, 1)]])
    assert can_place_on_foundation(state, up(S, 1), 1)
    assert not can_place_on_foundation(state, up(S, 2), 1)
    assert can_place_on_foundation(state, up(H, 2), 0)
    assert not can_place_on_foundation(state, up(D, 2), 0)
    assert not can_place_on_foundation(state, up(H, 3), 0)


def test_tableau_accepts_king_on_empty_and_alternating_descending():
    state = build_state(tableau=[[], [up(C, 7)]])
    assert can_place_on_tableau(state, up(S, 13), 0)
    assert not can_place_on_tableau(state, up(H, 12), 0)
    assert can_place_on_tableau(state, up(H, 6), 1)
    assert can_place_on_tableau(state, up(D, 6), 1)
    assert not can_place_on_tableau(state, up(S, 6), 1)
    assert not can_place_on_tableau(state, up(H, 5), 1)
    assert not can_place_on_tableau(state, up(H, 8), 1)


def test_moveable_sequence_stops_at_face_down_or_break():
    state = build_state(
        tableau=[
            [down(D, 9), up(C, 7), up(H, 6), up(S, 5)],
            [up(C, 7), up(H, 6), up(D, 5)],
            [up(C, 4), up(H, 12)],
        ]
    )
    assert moveable_sequence(state, 0, 0) == []
    assert moveable_sequence(state, 0, 1) == [up(C, 7), up(H, 6), up(S, 5)]
    assert moveable_sequence(state, 0, 2) == [up(H, 6), up(S, 5)]
    assert moveable_sequence(state, 1, 0) == [up(C, 7), up(H, 6)]
    assert moveable_sequence(state, 2, 0) == [up(C, 4)]
    assert moveable_sequence(state, 2, 1) == [up(H, 12)]
    assert moveable_sequence(state, 2, 5) == []


def test_is_won_only_when_every_foundation_has_13_cards():
    suits = [H, D, C, S]
    won = build_state(foundations=[full_suit(suit) for suit in suits])
    assert is_won(won)

    almost = build_state(
        foundations=[full_suit(H), full_suit(D), full_suit(C), full_suit(S)[:-1]],
        tableau=[[up(S, 13)]],
    )
    assert not is_won(almost)
    assert not is_won(build_state())
