"""Orchestration APIs in front of IMS, CICS and Db2 REST services."""

__version__ = "1.0.0"
