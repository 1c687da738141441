import math

class TimeManager:
    def __init__(self, debug_mode: bool = False):
        self.debug_mode = debug_mode
        self.elapsed: float = 0.0

    def advance(self, delta: float):
        if delta <= 0:
            return
        self.advance_to(self.elapsed + delta)

    def advance_to(self, target: float):
        # 時間只會往前走
        if target <= self.elapsed:
            return
        if self.debug_mode:
            print(f"[時間] +{target - self.elapsed:.3f}s -> {target:.3f}s")
        self.elapsed = target

    @property
    def time_passed(self) -> int:
        # 畫面與對手計算都只看整數秒，小數部分直接捨去
        return int(math.floor(self.elapsed))
