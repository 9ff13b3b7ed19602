"""REPL模块"""
from .shell import LineReader, ListLineReader, run_shell

__all__ = ['LineReader', 'ListLineReader', 'run_shell']
