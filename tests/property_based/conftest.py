"""
Shared Hypothesis configuration for property-based testing across portico.
"""
# 说明：属性测试的 Hypothesis 全局配置。
# 职责：
# - 注册 default / ci 两个配置档，ci 档增加样例数量
# - 通过 HYPOTHESIS_PROFILE 环境变量选择配置档

import os

from hypothesis import HealthCheck, settings

settings.register_profile("default", max_examples=100, deadline=None)
settings.register_profile(
    "ci",
    max_examples=500,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))
