"""Search trees, heaps, linked lists, stacks, queues, bounded arrays and postfix expressions."""

__version__ = "0.1.0"