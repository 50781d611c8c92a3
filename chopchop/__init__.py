"""
ChopChop — receipt → fridge inventory → recipe suggestions.
"""
__version__ = "0.1.0"
