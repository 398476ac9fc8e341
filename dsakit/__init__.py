"""Classic data structures and algorithms in plain Python: arrays, matrices,
bits, greedy counting, graphs, searching, sorting, stacks, queues and trees."""

__version__ = "0.1.0"