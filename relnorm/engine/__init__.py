"""
Analysis algorithms over functional dependency sets.
"""
