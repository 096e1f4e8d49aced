"""Application wiring for the activity clothing advisor."""
