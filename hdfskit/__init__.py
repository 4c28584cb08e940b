"""Hadoop configuration, client options, error mapping and helpers for HDFS tools."""

__version__ = "0.1.0"