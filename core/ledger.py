from core.models import GameState

class VoteLedger:
    """Vote counters for both sides plus the win/loss state machine.

    Every credit re-evaluates the game state. Once the game is WON or LOST the
    counters still move, but the state never changes again.
    """

    def __init__(self, total_votes: int, debug_mode: bool = False):
        self.total_votes = total_votes
        self.debug_mode = debug_mode
        self._player_votes = 0
        self._opponent_votes = 0
        self._state = GameState.CONTINUE

    @property
    def player_votes(self) -> int:
        return self._player_votes

    @property
    def opponent_votes(self) -> int:
        return self._opponent_votes

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def win_threshold(self) -> int:
        # 過半即勝，奇數總票數向下取整
        return self.total_votes // 2

    @property
    def is_over(self) -> bool:
        return self._state != GameState.CONTINUE

# --- 增加票數 ---
    def credit_player(self, amount: int) -> GameState:
        if amount < 0:
            if self.debug_mode: print(f"[票數] 忽略負數票數: {amount}")
            return self._state
        self._player_votes += amount
        return self.evaluate()

    def credit_opponent(self, amount: int) -> GameState:
        if amount < 0:
            if self.debug_mode: print(f"[票數] 忽略負數票數: {amount}")
            return self._state
        self._opponent_votes += amount
        return self.evaluate()

# --- 扣除票數 (唯一的減少途徑) ---
    def debit_player(self, amount: int) -> bool:
        if amount < 0 or self._player_votes < amount:
            return False
        self._player_votes -= amount
        return True

# --- 勝負判定 ---
    def evaluate(self) -> GameState:
        if self._state != GameState.CONTINUE:
            return self._state

        # 玩家優先判定：同時過半算玩家獲勝
        if self._player_votes >= self.win_threshold:
            self._state = GameState.WON
        elif self._opponent_votes >= self.win_threshold:
            self._state = GameState.LOST

        if self.debug_mode and self._state != GameState.CONTINUE:
            print(f"[勝負] {self._state.value} (玩家 {self._player_votes} / 對手 {self._opponent_votes})")
        return self._state
