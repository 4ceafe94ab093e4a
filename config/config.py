"""配置文件"""
import logging

import numpy as np

# 求值器参数
EVALUATOR_CONFIG = {
    "decimal_scale": 1000,  # 小数字面量量化到 1/1000
    "integer_dtype": "int64",  # 分子/分母的定长整数范围
    "strict_parentheses": True,  # 结尾残留 "(" 视为括号不匹配
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    scale = EVALUATOR_CONFIG["decimal_scale"]
    assert isinstance(scale, int) and scale > 0, "decimal_scale必须是正整数"
    dtype = np.dtype(EVALUATOR_CONFIG["integer_dtype"])
    assert np.issubdtype(dtype, np.signedinteger), "integer_dtype必须是有符号整数类型"
    level = logging.getLevelName(LOGGING_CONFIG["level"])
    assert isinstance(level, int), "未知的日志级别"
    logging.getLogger(__name__).debug("Configuration validated successfully")
