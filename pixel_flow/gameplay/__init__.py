"""
Gameplay logic: grid, rail, solver and the live session.
NO UI DEPENDENCIES.
"""
