"""Core simulation primitives (words, lanes, spawner, clock, matching, scoring).

Kept free of curses concerns so it can be driven by the terminal shell, the
frame driver and tests alike.
"""
