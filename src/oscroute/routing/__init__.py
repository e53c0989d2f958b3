"""Routing — compiled route table with first-match dispatch.

Messages are declared during setup and compiled into an immutable
route table; the dispatcher and renderer only read from it.
"""
