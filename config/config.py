"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "display_precision": 17,   # 命令行输出的有效数字位数
    "log_level": "INFO",
    "log_levels": ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
    "log_format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# 自检参数
SELF_TEST_CONFIG = {
    "tolerance": 1e-10,
    "show_rpn": True,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert SELF_TEST_CONFIG["tolerance"] > 0, "tolerance必须为正数"
    assert 1 <= EVALUATOR_CONFIG["display_precision"] <= 100, "display_precision超出范围"
    assert EVALUATOR_CONFIG["log_level"] in EVALUATOR_CONFIG["log_levels"]
