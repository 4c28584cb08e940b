"""Helpers for building an HDFS command-line client: paths, completion, sections and arguments."""