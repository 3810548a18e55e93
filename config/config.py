"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 操作符参数：符号 -> 优先级 + Operators中的方法名
OPERATOR_CONFIG = {
    "+": {"priority": 1, "method": "add"},
    "-": {"priority": 1, "method": "sub"},
    "×": {"priority": 2, "method": "mul"},
    "÷": {"priority": 2, "method": "div"},
}

# 分隔符参数
DELIMITER_CONFIG = {
    "left": "(",
    "right": ")",
}

# 操作数参数
OPERAND_CONFIG = {
    "pattern": r"[+-]?([0-9]+\.)?[0-9]+",  # 可选符号 + 可选整数部分和小数点 + 数字
}

# 求值门面参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,
    "separator": " ",  # 规范字符串中token之间的分隔符
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from rpn.operators import Operators

    priorities = {params["priority"] for params in OPERATOR_CONFIG.values()}
    assert priorities == {1, 2}, "加减优先级为1，乘除优先级为2"
    for symbol, params in OPERATOR_CONFIG.items():
        assert callable(getattr(Operators, params["method"], None)), \
            f"Operators has no method '{params['method']}' for '{symbol}'"
    delimiters = set(DELIMITER_CONFIG.values())
    assert len(delimiters) == 2, "左右括号必须不同"
    assert not delimiters & set(OPERATOR_CONFIG), "分隔符不能与操作符重名"
    assert EVALUATOR_CONFIG["cache_size"] > 0, "缓存大小必须为正"
    logger.info("Configuration validated successfully!")
