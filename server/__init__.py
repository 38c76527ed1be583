"""HTTP adapters for the Klondike engine."""
