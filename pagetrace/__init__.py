"""Multi-level page table simulator driven by binary memory address traces."""

__version__ = "0.1.0"