"""Rendering utilities.

``texture`` composes PIL images from sprite assets, reading entities through
:func:`grid_sokoban.utils.render.render_items`; ``text`` prints the board in
the level text format.
"""
