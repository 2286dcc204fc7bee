"""core/operators.py"""
import numpy as np
import logging

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合（float64语义，inf/NaN正常传播）"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除数为0时得到 ±inf 或 NaN，不做特殊处理"""
        with np.errstate(all='ignore'):
            return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def mod(operand1, operand2):
        """浮点取余，结果符号与被除数相同（C fmod）"""
        with np.errstate(all='ignore'):
            return np.fmod(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """实数幂；负底数配小数指数得到 NaN"""
        with np.errstate(all='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def apply(symbol, operand1, operand2):
        """按操作符符号调用对应方法"""
        from core.token_system import OPERATOR_DEFINITIONS

        spec = OPERATOR_DEFINITIONS.get(symbol)
        if spec is None:
            logger.error(f"Unknown binary operator: {symbol}")
            raise KeyError(symbol)
        op_method = getattr(Operators, spec.name)
        return op_method(operand1, operand2)
