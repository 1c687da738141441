import random
from typing import List, Optional, Tuple
from core.models import GameState, GameSnapshot, SupporterData, SupporterView
from core.ledger import VoteLedger
from core.clock import TimeManager
from core.supporters import SupporterManager
from core.opponent import OpponentManager
import config

class GameEngine:
    """One game session: owns the ledger, clock, supporters and opponent.

    The input side calls ``click`` and ``buy``; the simulation loop calls
    ``step`` once per frame; the display side reads ``snapshot``. Supporter
    votes and opponent votes are credited on a fixed schedule driven by the
    clock, supporters first.
    """

    def __init__(self, total_votes: int, supporters: List[SupporterData],
                 click_votes: int = 1, tick_interval: float = 1.0,
                 first_tick_delay: Optional[float] = None,
                 opponent_vote_range: Tuple[int, int] = (7, 15),
                 rng: Optional[random.Random] = None, debug_mode: bool = False):
        if tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {tick_interval}")

        self.debug_mode = debug_mode
        self.click_votes = click_votes
        self.tick_interval = tick_interval
        self.next_tick_at = tick_interval if first_tick_delay is None else first_tick_delay
        self.ticks = 0

        self.ledger = VoteLedger(total_votes, debug_mode=debug_mode)
        self.clock = TimeManager(debug_mode=debug_mode)
        self.supporters = SupporterManager(self.ledger, supporters, debug_mode=debug_mode)
        self.opponent = OpponentManager(self.ledger, self.clock, opponent_vote_range, rng=rng, debug_mode=debug_mode)

        self._announced = False

    @classmethod
    def from_config(cls, rng: Optional[random.Random] = None) -> "GameEngine":
        return cls(
            total_votes=config.TOTAL_VOTES,
            supporters=config.SUPPORTERS,
            click_votes=config.CLICK_VOTES,
            tick_interval=config.TICK_INTERVAL,
            first_tick_delay=config.FIRST_TICK_DELAY,
            opponent_vote_range=config.OPPONENT_VOTE_RANGE,
            rng=rng or config.make_rng(),
            debug_mode=config.DEBUG_MODE,
        )

    @property
    def state(self) -> GameState:
        return self.ledger.state

# --- 輸入事件 ---
    def click(self) -> int:
        self.ledger.credit_player(self.click_votes)
        return self.ledger.player_votes

    def buy(self, name: str) -> Tuple[bool, str]:
        supporter = self.supporters.resolve(name)
        if supporter is None:
            return False, f"Unknown supporter: {name}"
        return self.supporters.try_purchase(supporter)

# --- 模擬迴圈 ---
    def step(self, delta: float) -> List[str]:
        step_logs = []
        target = self.clock.elapsed + max(delta, 0.0)

        # 一次跨越多個間隔時逐一補發，時鐘先走到排定的時刻再觸發
        while self.next_tick_at <= target:
            self.clock.advance_to(self.next_tick_at)
            self.ticks += 1
            supporter_votes = self.supporters.add_supporter_votes()
            opponent_votes = self.opponent.increase_opponent_votes()
            if self.debug_mode:
                step_logs.append(f"[Tick {self.ticks}] supporters +{supporter_votes}, opponent +{opponent_votes}")
            self.next_tick_at += self.tick_interval

        self.clock.advance_to(target)
        self.ledger.evaluate()
        step_logs.extend(self.game_over_logs())
        return step_logs

    def game_over_logs(self) -> List[str]:
        if self._announced or not self.ledger.is_over:
            return []
        self._announced = True
        if self.ledger.state == GameState.WON:
            return [f"You won the game! ({self.ledger.player_votes} of {self.ledger.total_votes} votes)"]
        return [f"You lost the game! (opponent reached {self.ledger.opponent_votes} of {self.ledger.total_votes} votes)"]

# --- 畫面資料 ---
    def snapshot(self) -> GameSnapshot:
        views = [
            SupporterView(
                name=s.name,
                description=s.description,
                cost=self.supporters.get_cost(s),
                votes_per_second=s.votes_per_second,
                count=self.supporters.get_count(s),
                max_count=s.max_count,
                affordable=self.supporters.can_afford(s),
            )
            for s in self.supporters.supporters
        ]
        return GameSnapshot(
            total_votes=self.ledger.total_votes,
            player_votes=self.ledger.player_votes,
            opponent_votes=self.ledger.opponent_votes,
            state=self.ledger.state,
            time_passed=self.clock.time_passed,
            votes_per_second=self.supporters.total_votes_per_second(),
            supporters=views,
        )
