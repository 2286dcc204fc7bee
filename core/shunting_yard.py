"""中缀表达式 -> 后缀表达式（shunting-yard 算法）"""
import logging

from core.exceptions import MalformedNumberError, UnbalancedParenthesesError
from core.token_system import (
    SymbolType, Associativity, Token, classify, precedence, associativity
)

logger = logging.getLogger(__name__)


def scan_number(expression, start):
    """
    从start开始读取一个完整的数字字面量（数字和最多一个小数点）
    Returns:
        (Token, end): end 指向字面量之后的第一个字符
    """
    end = start
    seen_period = False
    has_digit = False

    while end < len(expression):
        symbol_type = classify(expression[end], end)
        if symbol_type == SymbolType.VALUE:
            has_digit = True
        elif symbol_type == SymbolType.PERIOD:
            if seen_period:
                logger.error(f"Second decimal point in number starting at position {start}")
                raise MalformedNumberError("More than one decimal point in number", end)
            seen_period = True
        else:
            break
        end += 1

    if not has_digit:
        logger.error(f"Number without digits at position {start}")
        raise MalformedNumberError("Number has no digits", start)

    return Token(SymbolType.VALUE, expression, start, end), end


def _should_pop(top, incoming):
    # 栈顶优先级更高，或优先级相同且新操作符为左结合
    if top.type != SymbolType.OPERATOR:
        return False
    top_prec = precedence(top.symbol)
    incoming_prec = precedence(incoming)
    if top_prec < incoming_prec:
        return True
    return top_prec == incoming_prec and associativity(incoming) == Associativity.LEFT


def infix_to_postfix(expression):
    """
    将中缀表达式转换为后缀（RPN）Token序列
    Args:
        expression: 中缀表达式字符串
    Returns:
        只包含数字和操作符的Token列表
    """
    stack = []   # 操作符栈
    output = []
    i = 0

    while i < len(expression):
        symbol_type = classify(expression[i], i)

        if symbol_type in (SymbolType.VALUE, SymbolType.PERIOD):
            token, i = scan_number(expression, i)
            output.append(token)
            continue

        if symbol_type == SymbolType.OPERATOR:
            while stack and _should_pop(stack[-1], expression[i]):
                output.append(stack.pop())
            stack.append(Token(SymbolType.OPERATOR, expression, i))
        elif symbol_type == SymbolType.OPEN:
            stack.append(Token(SymbolType.OPEN, expression, i))
        elif symbol_type == SymbolType.CLOSE:
            while stack and stack[-1].type != SymbolType.OPEN:
                output.append(stack.pop())
            if not stack:
                logger.error(f"Closing parenthesis without match at position {i}")
                raise UnbalancedParenthesesError("Unmatched ')'", i)
            stack.pop()
        # BLANK: 跳过
        i += 1

    while stack:
        token = stack.pop()
        if token.type == SymbolType.OPEN:
            logger.error(f"Unclosed parenthesis at position {token.start}")
            raise UnbalancedParenthesesError("Unmatched '('", token.start)
        output.append(token)

    return output
