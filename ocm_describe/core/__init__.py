"""Core business logic."""

from .describer import ClusterDescriber, DescribeError, print_cluster_description

__all__ = ["ClusterDescriber", "DescribeError", "print_cluster_description"]
