"""
牌组配置
包含随机种子、批量发牌策略和调试设置
"""

import random
from dataclasses import dataclass
from typing import Optional

from .exceptions import DeckConfigError


@dataclass
class DeckConfig:
    """
    牌组配置类
    """
    # 随机种子，用于可重现的洗牌；None表示使用进程级随机源
    random_seed: Optional[int] = None

    # 按数量发牌时牌不够: False抛出EmptyDeckError，True发完剩余的牌为止
    stop_when_exhausted: bool = False

    # 调试模式，洗牌和发牌记录以INFO级别输出
    debug_mode: bool = False

    def __post_init__(self):
        """验证配置的有效性"""
        if self.random_seed is not None:
            if isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int):
                raise DeckConfigError(f"随机种子必须是整数: {self.random_seed!r}")

        if not isinstance(self.stop_when_exhausted, bool):
            raise DeckConfigError(f"stop_when_exhausted必须是布尔值: {self.stop_when_exhausted!r}")

        if not isinstance(self.debug_mode, bool):
            raise DeckConfigError(f"debug_mode必须是布尔值: {self.debug_mode!r}")

    @property
    def is_reproducible(self) -> bool:
        """是否使用固定种子"""
        return self.random_seed is not None

    def make_rng(self) -> Optional[random.Random]:
        """根据种子创建私有随机数生成器，没有种子时返回None"""
        if self.random_seed is None:
            return None
        return random.Random(self.random_seed)

    @classmethod
    def default(cls) -> 'DeckConfig':
        """默认配置：进程级随机源，牌不够时抛出异常"""
        return cls()

    @classmethod
    def reproducible(cls, seed: int) -> 'DeckConfig':
        """创建使用固定种子的配置"""
        return cls(random_seed=seed)
