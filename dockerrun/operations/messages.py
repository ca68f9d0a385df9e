"""Тексты сообщений операций."""

from __future__ import annotations

from typing import Final

ADD_AT_LEAST_ONE: Final[str] = "Please Add At Least One Container To Workspace"
ALL_STOPPED: Final[str] = "All Containers For Current Workspace Are Stopped"
ALL_RUNNING: Final[str] = "All Containers For Current Workspace Are Running"
NO_NON_RELATED: Final[str] = "No non related container found"
NOTHING_TO_ADD: Final[str] = "No Container Available To Add"

SELECT_TO_STOP: Final[str] = "Please Select At least One Container To Stop"
SELECT_TO_START: Final[str] = "Please Select At least One Container To Start"
SELECT_TO_ADD: Final[str] = "Please Select At least One Container To Add"
SELECT_TO_REMOVE: Final[str] = "Please Select At least One Container To Remove"

PICK_TO_STOP: Final[str] = "Select Containers To Stop"
PICK_TO_START: Final[str] = "Select Containers To Start"
PICK_TO_ADD: Final[str] = "Select Containers To Add To Workspace"
PICK_TO_REMOVE: Final[str] = "Select Containers To Remove From Workspace"

PROGRESS_STOPPING: Final[str] = "Stopping Containers"
PROGRESS_STARTING: Final[str] = "Starting Containers"
PROGRESS_STOPPING_NON_RELATED: Final[str] = "Stopping Non Related Containers"

STOPPED: Final[str] = "Successfully Stopped {label}"
STOPPED_NON_RELATED: Final[str] = "Successfully Stopped Non Related Container {label}"
STARTED: Final[str] = "Successfully Started {label}"
ADDED: Final[str] = "Successfully Added {label}"
REMOVED: Final[str] = "Successfully Removed {label}"

STOP_FAILED: Final[str] = "Failed To Stop {label}: {reason}"
START_FAILED: Final[str] = "Failed To Start {label}: {reason}"
