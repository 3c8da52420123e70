"""领域层模型与异常。

包含：
- models: CrmObject / CrmPage / ResultEnvelope 等统一数据结构。
- exceptions: 业务异常类型定义。
"""
