"""
store models for the quote service.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass(frozen=True)
class Quote:
    """语录记录

    id 由存储分配，创建后不变；added_at 为 RFC3339 时间字符串。
    记录不可变，更新时整体替换。
    """
    id: int = 0
    text: str = ""
    author: str = ""
    category: str = ""
    color: str = ""
    added_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """转为对外的 JSON 结构，addedAt 为空时省略"""
        data = asdict(self)
        added_at = data.pop('added_at')
        if added_at:
            data['addedAt'] = added_at
        return data


# 进程启动时载入的初始语录，按顺序分配 id 1-5
SEED_QUOTES = (
    Quote(
        id=1,
        text="The only way to do great work is to love what you do.",
        author="Steve Jobs",
        category="Motivation",
        color="from-purple-500 to-pink-500",
    ),
    Quote(
        id=2,
        text="Innovation distinguishes between a leader and a follower.",
        author="Steve Jobs",
        category="Leadership",
        color="from-blue-500 to-cyan-400",
    ),
    Quote(
        id=3,
        text="Design is not just what it looks like and feels like. Design is how it works.",
        author="Steve Jobs",
        category="Design",
        color="from-green-400 to-teal-500",
    ),
    Quote(
        id=4,
        text="Your time is limited, so don't waste it living someone else's life.",
        author="Steve Jobs",
        category="Life",
        color="from-yellow-400 to-orange-500",
    ),
    Quote(
        id=5,
        text="Think different.",
        author="Apple Inc.",
        category="Innovation",
        color="from-red-500 to-pink-500",
    ),
)
