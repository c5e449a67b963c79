"""Describe OpenShift Cluster Manager clusters."""

__version__ = "0.1.0"
