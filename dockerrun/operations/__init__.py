"""Команды Docker Run над контейнерами рабочего пространства."""

from dockerrun.operations.base import ContainerOperation, OperationResult, OperationStatus
from dockerrun.operations.batch import BatchExecutor, BatchReport
from dockerrun.operations.start import StartOperation
from dockerrun.operations.stop import StopOperation
from dockerrun.operations.stop_non_related import StopNonRelatedOperation
from dockerrun.operations.workspace import AddOperation, RemoveOperation

__all__ = [
    "AddOperation",
    "BatchExecutor",
    "BatchReport",
    "ContainerOperation",
    "OperationResult",
    "OperationStatus",
    "RemoveOperation",
    "StartOperation",
    "StopNonRelatedOperation",
    "StopOperation",
]
