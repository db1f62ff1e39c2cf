"""Console tic-tac-toe with pluggable player strategies and game states, plus chess colour and piece-type helpers."""

__version__ = "1.0.0"