"""Sort integers with two stacks and a restricted set of moves, and print the moves."""

__version__ = "1.0.0"