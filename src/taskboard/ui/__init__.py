"""Textual UI for taskboard."""

from taskboard.ui.app import TaskboardApp

__all__ = ["TaskboardApp"]
