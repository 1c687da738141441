import random
from typing import Optional, Tuple
from core.clock import TimeManager
from core.ledger import VoteLedger

class OpponentManager:
    def __init__(self, ledger: VoteLedger, clock: TimeManager,
                 vote_range: Tuple[int, int] = (7, 15),
                 rng: Optional[random.Random] = None, debug_mode: bool = False):
        lo, hi = vote_range
        if lo >= hi:
            raise ValueError(f"opponent vote range must satisfy lo < hi, got {vote_range}")
        self.ledger = ledger
        self.clock = clock
        self.vote_range = (lo, hi)
        self.rng = rng or random.Random()
        self.debug_mode = debug_mode

    def increase_opponent_votes(self) -> int:
        # 票數隨經過時間放大：頻率固定，單次增量隨時間線性成長
        time_passed = self.clock.time_passed
        vote_to_add = self.rng.randrange(*self.vote_range) * time_passed
        if self.debug_mode:
            print(f"[對手] 增加 {vote_to_add} 票 (經過 {time_passed} 秒)")
        self.ledger.credit_opponent(vote_to_add)
        return vote_to_add
