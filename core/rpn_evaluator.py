"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.exceptions import MalformedExpressionError, StackUnderflowError
from core.operators import Operators
from core.token_system import SymbolType, format_rpn

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估RPN表达式
        Args:
            token_sequence: 后缀顺序的Token序列
        Returns:
            float结果
        """
        stack = []

        for token in token_sequence:
            if token.type == SymbolType.VALUE:
                stack.append(token.value)

            # ================== 二元操作符处理 ==================
            elif token.type == SymbolType.OPERATOR:
                if len(stack) < 2:
                    logger.error(f"Insufficient operands for {token.symbol}")
                    raise StackUnderflowError(
                        f"Operator {token.symbol!r} at position {token.start} needs two operands"
                    )
                operand2 = stack.pop()
                operand1 = stack.pop()
                stack.append(Operators.apply(token.symbol, operand1, operand2))

            else:
                logger.error(f"Unexpected token in RPN sequence: {token!r}")
                raise MalformedExpressionError(f"Unexpected token {token.text!r} in RPN sequence")

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.debug(f"RPN expression: {format_rpn(token_sequence)}")
            raise MalformedExpressionError(
                f"Expression left {len(stack)} values on the stack, expected 1"
            )

        return float(stack[0])
