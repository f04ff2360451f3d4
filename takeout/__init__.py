"""Takeout: shuffled affirmations with progress tracking."""
