"""计算器模块 - 表达式求值入口"""
from .evaluator import ExpressionEvaluator, evaluate

__all__ = ['ExpressionEvaluator', 'evaluate']
