import io

from klondike.cli import card_text, execute, main, render
from klondike.cards import Card, Suit
from klondike.game import KlondikeGame
from klondike.rules_schema import GameConfig


def test_card_text():
    assert card_text(None) == "[  ]"
    assert card_text(Card(Suit.HEARTS, 12)) == "[##]"
    assert card_text(Card(Suit.HEARTS, 12, face_up=True)) == "[Q♥]"
    assert card_text(Card(Suit.SPADES, 10, face_up=True)) == "[10♠]"


def test_render_shows_stock_count_and_columns():
    game = KlondikeGame(config=GameConfig(seed=2))
    text = render(game.state)
    assert "stock(24)" in text
    assert " t6 " in text


def test_execute_commands():
    game = KlondikeGame(config=GameConfig(seed=2))
    assert "stock(23)" in execute(game, "draw")
    assert "stock(24)" in execute(game, "undo")
    assert execute(game, "undo") == "Nothing to undo."
    assert execute(game, "hint") == game.hint().message
    assert execute(game, "move tableau-0 tableau-0") == "That move is not allowed."
    assert execute(game, "move heap tableau-0").startswith("Invalid input")
    assert execute(game, "flip 0") == "That move is not allowed."
    assert execute(game, "dance").startswith("Unknown command")
    assert execute(game, "") == ""
    assert execute(game, "quit") is None


def test_main_reads_commands_until_quit():
    stdout = io.StringIO()
    stdin = io.StringIO("draw\nhint\nquit\ndraw\n")
    assert main(["--seed", "4", "--history-limit", "5"], stdin=stdin, stdout=stdout) == 0
    output = stdout.getvalue()
    assert output.count("stock(") == 2
    assert "stock(23)" in output
