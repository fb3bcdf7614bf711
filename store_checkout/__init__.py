"""Threaded retail checkout simulation.

A run wires together:
- N checkout lines, each a FIFO queue shared by many visitors and one cashier
- one cashier thread per line, serving visitors item by item
- M visitor threads that shop for a while, queue, and wait to be served

Shutdown uses a poison visitor per line once every real visitor has left.

See `python -m store_checkout.app run -h` for how to run.
"""
