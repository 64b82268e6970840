import random


class RandomSelector:
    """
    从 [0, size) 中随机抽取不重复的下标：
    - 抽到已选过的下标直接丢弃重抽（拒绝采样）
    - count > size 时只抽 size 个，即全选
    - count <= 0 或 size <= 0 返回空list
    """

    def __init__(self, rng: random.Random = None):
        self.rng = rng if rng is not None else random.Random()

    def draw(self, count: int, size: int) -> list[int]:
        target = min(count, size)
        if target <= 0:
            return []

        chosen = set()  # 每次抽取新建，不跨运行共享
        indices = []  # 保留抽取顺序
        while len(indices) < target:
            index = self.rng.randrange(size)
            if index in chosen:
                continue
            chosen.add(index)
            indices.append(index)
        return indices
