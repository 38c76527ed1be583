"""Bot strategies for Klondike."""

from .base import ActionType, BotAction, BotStrategy
from .hint_bot import HintBot
from .random_bot import RandomBot

__all__ = ["ActionType", "BotAction", "BotStrategy", "HintBot", "RandomBot"]
