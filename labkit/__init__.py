"""Linked lists, queues, graphs, search trees, sorting, record files and small demo commands."""

__version__ = "0.1.0"