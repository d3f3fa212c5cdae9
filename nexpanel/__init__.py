"""Control Nextion HMI touch displays over a serial line: protocol, display, components and a table pager."""

__version__ = "0.1.0"