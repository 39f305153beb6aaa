"""Two-stack sorting with a small instruction set, an instruction checker and a random input generator."""

__version__ = "0.1.0"