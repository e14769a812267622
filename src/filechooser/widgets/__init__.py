"""Widgets rendered inside the chooser screen."""
