"""
particle_life module: render/colors.py

Central color palette. Creature colors live with the creature types.
"""

BG = (14, 14, 18)
FOOD = (255, 255, 0)
HUD_TEXT = (235, 235, 235)
HUD_DIM = (150, 150, 160)
