import numpy as np
import pandas as pd
import logging
from typing import Iterable, List

from core import (
    CalculatorError, MalformedExpressionError, RPNEvaluator, RPNValidator, StackUnderflowError, Token,
    infix_to_postfix, format_rpn, parse_rpn
)

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """中缀表达式求值的统一入口；不保存任何跨调用的状态"""

    def __init__(self):
        self.rpn_evaluator = RPNEvaluator

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            float结果；输入非法时抛出CalculatorError
        """
        token_sequence = self.to_rpn(expression)
        result = self.rpn_evaluator.evaluate(token_sequence)
        logger.debug(f"{expression!r} = {result!r}")
        return result

    def to_rpn(self, expression: str) -> List[Token]:
        token_sequence = infix_to_postfix(expression)
        logger.debug(f"RPN of {expression!r}: {format_rpn(token_sequence)}")
        return token_sequence

    def to_rpn_string(self, expression: str) -> str:
        return format_rpn(self.to_rpn(expression))

    def evaluate_rpn(self, rpn_string: str) -> float:
        """直接评估空格分隔的后缀表达式，如 '3 4 2 * +'"""
        token_sequence = parse_rpn(rpn_string)

        # 先验证栈平衡，拒绝不完整的序列
        stack_size = RPNValidator.calculate_stack_size(token_sequence)
        if stack_size < 0:
            logger.error(f"Insufficient operands in RPN expression: {rpn_string!r}")
            raise StackUnderflowError(
                f"RPN expression {rpn_string!r} applies an operator to fewer than two values"
            )
        if stack_size != 1:
            logger.error(f"Incomplete RPN expression: {rpn_string!r}")
            raise MalformedExpressionError(
                f"RPN expression {rpn_string!r} does not reduce to exactly one value"
            )
        return self.rpn_evaluator.evaluate(token_sequence)

    def evaluate_many(self, expressions: Iterable[str]) -> pd.Series:
        """
        逐条独立评估多个表达式
        Returns:
            以表达式为索引的Series；失败的表达式记为NaN
        """
        expressions = list(expressions)
        results = []
        for expression in expressions:
            try:
                results.append(self.evaluate(expression))
            except CalculatorError as e:
                logger.warning(f"Failed to evaluate {expression!r}: {e}")
                results.append(np.nan)
        return pd.Series(results, index=pd.Index(expressions, name='expression'),
                         name='result', dtype=float)


def evaluate(expression: str) -> float:
    """计算中缀表达式的值"""
    return ExpressionEvaluator().evaluate(expression)
