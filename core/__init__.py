"""Workout tracker Django app: views, controller, persistence, and renderers."""
