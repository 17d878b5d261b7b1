"""Render RGBA images to a true-colour terminal with half-block characters."""