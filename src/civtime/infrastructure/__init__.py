"""Infrastructure layer — host clock and locale collaborators.

This is the only layer that reads host state.
"""
