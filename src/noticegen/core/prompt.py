"""Prompt construction for railway severe-weather notices."""

from __future__ import annotations

from noticegen.types.providers import ChatMessage
from noticegen.types.request import RequestParameters


def build_system_prompt(params: RequestParameters) -> str:
    """Instructional prompt describing the notice format the model must follow."""
    attachment_line = f"\n附件：{params.attachment}" if params.attachment else ""
    return f"""你是铁路车务调度部门的通知起草专家，负责撰写应对极端天气（如强降雨、寒潮、暴雪、台风、高温等）下的铁路运输组织通知。

<think>
用户提供了以下信息：
- 发文单位：{params.unit}
- 天气类型：{params.weather}
- 起始日期：{params.start_date}
- 结束日期：{params.end_date}
- 涉及线路：{params.lines}
- 附件信息：{params.attachment}

现在分析这个天气类型对铁路运输可能造的影响：
1. 分析天气特点和危险性
2. 评估对指定线路的潜在影响
3. 制定针对性的应对措施
4. 确保措施覆盖各个关键环节
</think>

请严格按照以下要求撰写通知：

1. 顶部第一行为"通知"二字
2. 通知标题格式：[{params.unit}]关于积极做好[{params.weather}]应对工作的通知
3. 正文开头称呼："机关各科室、段属各站所："
4. 简要说明气象预报、影响线路、气象威胁及措施总要求
5. 应对措施要求：
   - 使用阿拉伯数字编号：1. 2. 3.
   - 每条包含加粗标题+正式内容
   - 最少5段，最多7段
   - 每段100-350字
   - 涵盖值班值守、设备检查、调车安全、旅客服务、应急物资、舆情应对等
6. 结尾落款：
{params.unit}
{params.end_date}
{attachment_line}
7. 全文必须超过1000字
8. 使用**粗体**突出重要内容
9. 保持专业格式和用词
10. 确保逻辑清晰、结构完整

请严格按照以上要求输出专业、实用的铁路运输应对通知。"""


def build_user_prompt(params: RequestParameters) -> str:
    return (
        "请根据以下参数生成铁路运输恶劣天气应对通知：\n"
        f"发文单位：{params.unit}\n"
        f"天气类型：{params.weather}\n"
        f"起始日期：{params.start_date}\n"
        f"结束日期：{params.end_date}\n"
        f"涉及线路：{params.lines}\n"
        f"附件信息：{params.attachment}"
    )


def build_messages(params: RequestParameters) -> list[ChatMessage]:
    """System + user message pair for one submission."""
    return [
        ChatMessage(role="system", content=build_system_prompt(params)),
        ChatMessage(role="user", content=build_user_prompt(params)),
    ]
