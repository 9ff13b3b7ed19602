"""数据模块 - 批量求值"""
from .batch import load_expressions, evaluate_expressions, save_results

__all__ = ['load_expressions', 'evaluate_expressions', 'save_results']
