"""Small Unix tools and demonstrations of files, terminals, signals, processes, pipes and sockets."""

__version__ = "0.1.0"