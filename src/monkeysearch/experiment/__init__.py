"""
Experiment layer: CLI entry points for running Monkey Search from the shell.
"""
