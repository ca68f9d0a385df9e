"""Доступ к Docker daemon через docker SDK."""
