"""Tk front-end for the artworks table.

Widget modules import tkinter at module scope; `gui.state`, `gui.controller`
and `gui.utils.async_tasks` do not, so the controller can be driven in
headless test runs.
"""
