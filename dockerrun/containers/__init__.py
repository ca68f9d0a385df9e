"""Модель контейнеров и их классификация относительно рабочего пространства."""

from dockerrun.containers.classifier import ContainerClassifier
from dockerrun.containers.models import Container, ContainerList

__all__ = ["Container", "ContainerClassifier", "ContainerList"]
