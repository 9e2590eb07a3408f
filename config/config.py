"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 算术词表参数
ARITHMETIC_CONFIG = {
    # + - 最低，* / 其次，^ 最高（仍低于函数的哨兵优先级）
    "precedence": {"+": 0, "-": 0, "*": 1, "/": 1, "^": 2},
    "power_right_associative": True,  # 2 ^ 2 ^ 3 = 2 ^ (2 ^ 3)
    "functions": {
        "sqrt": 1, "abs": 1, "log": 1, "exp": 1,
        "sin": 1, "cos": 1, "tan": 1,
        "max": 2, "min": 2, "hypot": 2,
        "clamp": 3,
    },
    "value_chars": "0123456789.",
    "division_default": 0.0,  # 除零时的替代值
}

# 复数函数词表参数
COMPLEX_CONFIG = {
    "precedence": {"+": 0, "-": 0, "*": 1, "/": 1, "^": 2},
    "power_right_associative": False,  # 2 ^ 3 ^ 2 = (2 ^ 3) ^ 2
    "round_precision": 8,  # round_complex 默认保留位数
}

# 布尔词表参数
BOOLEAN_CONFIG = {
    "true_words": ("true",),
    "false_words": ("false",),
    "and_char": "&",
    "or_char": "|",
    "not_char": "!",
    "precedence": 0,  # & 和 | 同级，左结合
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import PAREN_PRECEDENCE, FUNCTION_PRECEDENCE

    for table in (ARITHMETIC_CONFIG["precedence"], COMPLEX_CONFIG["precedence"],
                  {"bool": BOOLEAN_CONFIG["precedence"]}):
        for symbol, precedence in table.items():
            assert PAREN_PRECEDENCE < precedence < FUNCTION_PRECEDENCE, \
                f"precedence of '{symbol}' collides with a reserved sentinel"

    for name, arity in ARITHMETIC_CONFIG["functions"].items():
        assert arity >= 0, f"function '{name}' has negative arity"

    chars = {BOOLEAN_CONFIG["and_char"], BOOLEAN_CONFIG["or_char"], BOOLEAN_CONFIG["not_char"]}
    assert len(chars) == 3, "boolean operator characters must be distinct"
    assert COMPLEX_CONFIG["round_precision"] >= 0, "round_precision must be non-negative"

    logger.info("Configuration validated successfully!")
