"""配置文件"""

# 计算核心参数
CALC_CONFIG = {
    "blank_chars": " \t",  # 只跳过空格和制表符，其他字符都进入数字字面量
    "cache_size": 1000,  # Calculator 的LRU缓存条数，0 表示不缓存
}

# 交互式控制台
CONSOLE_CONFIG = {
    "prompt": "Enter an expression: ",
    "error_exit_code": 52,
}

# HTTP 表单前端
SERVER_CONFIG = {
    "host": "0.0.0.0",
    "port": 8080,
    "debug": False,
}

# 批量计算
BATCH_CONFIG = {
    "expression_column": "expression",
    "output_path": "calc_results.csv",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert 0 < CONSOLE_CONFIG["error_exit_code"] < 256, "退出码必须在1-255之间"
    assert 0 < SERVER_CONFIG["port"] < 65536, "端口号不合法"
    assert CALC_CONFIG["cache_size"] >= 0, "缓存大小不能为负"
    assert "-" not in CALC_CONFIG["blank_chars"], "减号不能作为空白字符"
    print("Configuration validated successfully!")
