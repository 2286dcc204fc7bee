"""核心模块 - Token系统、中缀转后缀、RPN评估器和操作符"""
from .exceptions import (
    CalculatorError, InvalidCharacterError, MalformedNumberError,
    UnbalancedParenthesesError, MalformedExpressionError, StackUnderflowError
)
from .token_system import (
    SymbolType, Associativity, Token, OPERATOR_DEFINITIONS, RPNValidator,
    classify, format_rpn, parse_rpn
)
from .shunting_yard import infix_to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'CalculatorError', 'InvalidCharacterError', 'MalformedNumberError',
    'UnbalancedParenthesesError', 'MalformedExpressionError', 'StackUnderflowError',
    'SymbolType', 'Associativity', 'Token', 'OPERATOR_DEFINITIONS', 'RPNValidator',
    'classify', 'format_rpn', 'parse_rpn',
    'infix_to_postfix', 'RPNEvaluator', 'Operators'
]
