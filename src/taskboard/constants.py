"""Shared constants for taskboard."""

BRANCH_NAME = "taskboard"
TASKS_FILE = "tasks.json"

MOVE_FAILED_MESSAGE = "Failed to move task, changes reverted"
