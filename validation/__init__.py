"""验证模块"""
from .self_test import REFERENCE_CASES, run_self_test, all_passed

__all__ = ['REFERENCE_CASES', 'run_self_test', 'all_passed']
