"""Compile Unix/Ruby-style glob patterns into reusable path matchers."""

from .glob import Glob, GlobError, compile_glob, must_compile_glob, translate_glob

__all__ = [
    "Glob",
    "GlobError",
    "compile_glob",
    "must_compile_glob",
    "translate_glob",
]
