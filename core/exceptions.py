"""core/exceptions.py"""


class CalculatorError(ValueError):
    """所有表达式错误的基类；出现时不返回任何部分结果"""


class InvalidCharacterError(CalculatorError):
    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected character {char!r} at position {position}")


class MalformedNumberError(CalculatorError):
    def __init__(self, message, position):
        self.position = position
        super().__init__(f"{message} at position {position}")


class UnbalancedParenthesesError(CalculatorError):
    def __init__(self, message, position):
        self.position = position
        super().__init__(f"{message} at position {position}")


class MalformedExpressionError(CalculatorError):
    """后缀序列不完整：结束时栈中不是恰好一个值"""


class StackUnderflowError(MalformedExpressionError):
    """操作符可用的操作数不足两个"""
