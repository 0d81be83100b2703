"""Core data models shared by the layout engines."""
