"""配置文件"""

# 交互式REPL参数
REPL_CONFIG = {
    "banner": ["Reverse Polish Notation.", "Type quit to exit"],
    "prompt": "> ",
    "quit_command": "quit",
    "error_prefix": "Error: ",
}

# 批量求值参数
BATCH_CONFIG = {
    "expression_column": "expression",  # CSV输入中表达式所在列
    "default_output_path": "rpn_results.csv",
    "comment_prefix": "#",  # 文本输入中以此开头的行被跳过
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core import OPERATOR_DEFINITIONS
    assert REPL_CONFIG["quit_command"] == REPL_CONFIG["quit_command"].strip(), "退出命令不能含空白"
    assert REPL_CONFIG["quit_command"] not in OPERATOR_DEFINITIONS, "退出命令不能与操作符冲突"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True
