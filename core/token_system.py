"""core/token_system.py"""
import logging
from enum import Enum

from core.exceptions import InvalidCharacterError, MalformedNumberError

logger = logging.getLogger(__name__)


class SymbolType(Enum):
    VALUE = "value"        # 数字 0-9
    OPERATOR = "operator"  # + - * / % ^
    OPEN = "open"          # (
    CLOSE = "close"        # )
    PERIOD = "period"      # 小数点
    BLANK = "blank"        # 空格、制表符、换行


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorSpec:
    def __init__(self, symbol, name, precedence, associativity):
        self.symbol = symbol
        self.name = name
        self.precedence = precedence  # 数值越小优先级越高
        self.associativity = associativity


# 操作符定义字典
OPERATOR_DEFINITIONS = {
    '^': OperatorSpec('^', 'pow', 1, Associativity.RIGHT),
    '*': OperatorSpec('*', 'mul', 2, Associativity.LEFT),
    '/': OperatorSpec('/', 'div', 2, Associativity.LEFT),
    '%': OperatorSpec('%', 'mod', 2, Associativity.LEFT),
    '+': OperatorSpec('+', 'add', 3, Associativity.LEFT),
    '-': OperatorSpec('-', 'sub', 3, Associativity.LEFT),
}

# 字符分类表（闭合字母表）
SYMBOL_TYPES = {ch: SymbolType.VALUE for ch in '0123456789'}
SYMBOL_TYPES.update({op: SymbolType.OPERATOR for op in OPERATOR_DEFINITIONS})
SYMBOL_TYPES.update({
    '(': SymbolType.OPEN,
    ')': SymbolType.CLOSE,
    '.': SymbolType.PERIOD,
    ' ': SymbolType.BLANK,
    '\t': SymbolType.BLANK,
    '\n': SymbolType.BLANK,
})


def classify(ch, position=0):
    """返回单个字符的SymbolType；字母表之外的字符直接报错"""
    symbol_type = SYMBOL_TYPES.get(ch)
    if symbol_type is None:
        logger.error(f"Unexpected character {ch!r} at position {position}")
        raise InvalidCharacterError(ch, position)
    return symbol_type


def precedence(symbol):
    return OPERATOR_DEFINITIONS[symbol].precedence


def associativity(symbol):
    return OPERATOR_DEFINITIONS[symbol].associativity


class Token:
    """
    表达式中的一个片段：数字或操作符。
    只记录源文本中的区间 [start, end)，数值在访问value时才解析。
    """

    def __init__(self, token_type, source, start, end=None):
        self.type = token_type
        self.source = source
        self.start = start
        self.end = start + 1 if end is None else end

    @property
    def text(self):
        return self.source[self.start:self.end]

    @property
    def symbol(self):
        return self.source[self.start]

    @property
    def value(self):
        if self.type != SymbolType.VALUE:
            raise TypeError(f"Token {self.text!r} is not a number")
        return float(self.text)

    @property
    def is_operator(self):
        return self.type == SymbolType.OPERATOR

    @property
    def spec(self):
        return OPERATOR_DEFINITIONS[self.symbol]

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


def format_rpn(token_sequence):
    """把后缀序列渲染成以空格分隔的文本，如 '3 4 2 * +'"""
    return ' '.join(token.text for token in token_sequence)


def parse_rpn(rpn_string):
    """
    解析空格分隔的后缀表达式文本，生成Token序列
    Args:
        rpn_string: 例如 '3 4 2 * +'
    Returns:
        Token列表（只包含数字和操作符）
    """
    token_sequence = []
    pos = 0
    length = len(rpn_string)

    while pos < length:
        ch = rpn_string[pos]
        symbol_type = classify(ch, pos)

        if symbol_type == SymbolType.BLANK:
            pos += 1
            continue

        start = pos
        while pos < length and SYMBOL_TYPES.get(rpn_string[pos]) != SymbolType.BLANK:
            pos += 1
        part = rpn_string[start:pos]

        if symbol_type == SymbolType.OPERATOR and len(part) == 1:
            token_sequence.append(Token(SymbolType.OPERATOR, rpn_string, start))
            continue

        # 其余片段必须是完整的数字字面量
        seen_period = False
        for offset, c in enumerate(part):
            kind = classify(c, start + offset)
            if kind == SymbolType.PERIOD and not seen_period:
                seen_period = True
            elif kind != SymbolType.VALUE:
                if kind == SymbolType.PERIOD:
                    logger.error(f"Second decimal point in {part!r}")
                    raise MalformedNumberError("More than one decimal point in number", start + offset)
                logger.error(f"Unexpected character {c!r} in RPN item {part!r}")
                raise InvalidCharacterError(c, start + offset)
        if part == '.':
            logger.error(f"Number without digits at position {start}")
            raise MalformedNumberError("Number has no digits", start)
        token_sequence.append(Token(SymbolType.VALUE, rpn_string, start, pos))

    return token_sequence


class RPNValidator:
    @staticmethod
    def calculate_stack_size(token_sequence):
        """模拟求值栈的深度；出现下溢时返回 -1"""
        stack_size = 0
        for token in token_sequence:
            if token.type == SymbolType.VALUE:
                stack_size += 1
            elif token.type == SymbolType.OPERATOR:
                if stack_size < 2:
                    return -1
                stack_size -= 1
            else:
                # 括号不应出现在后缀序列中
                return -1
        return stack_size

    @staticmethod
    def is_complete(token_sequence):
        return RPNValidator.calculate_stack_size(token_sequence) == 1
