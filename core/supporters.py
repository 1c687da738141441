from typing import Dict, List, Optional, Tuple
from core.models import SupporterData, PurchaseResult
from core.ledger import VoteLedger

class SupporterManager:
    def __init__(self, ledger: VoteLedger, supporters: Optional[List[SupporterData]] = None, debug_mode: bool = False):
        self.ledger = ledger
        self.debug_mode = debug_mode
        # 以名稱為鍵，避免同一種支持者被載入兩次
        self.catalog: Dict[str, SupporterData] = {}
        self.counts: Dict[str, int] = {}
        for supporter in supporters or []:
            self.register(supporter)

    def register(self, supporter: SupporterData):
        if supporter.name in self.catalog:
            return
        self.catalog[supporter.name] = supporter
        self.counts[supporter.name] = 0
        if self.debug_mode: print(f"[支持者] 初始化: {supporter.name}")

    @property
    def supporters(self) -> List[SupporterData]:
        return list(self.catalog.values())

    def resolve(self, name: str) -> Optional[SupporterData]:
        return self.catalog.get(name)

    def _lookup(self, supporter: Optional[SupporterData]) -> Optional[SupporterData]:
        # 一律以先註冊的那筆資料為準
        if supporter is None:
            return None
        return self.catalog.get(supporter.name)

# --- 查詢 (未註冊的種類一律回傳 0) ---
    def get_cost(self, supporter: SupporterData) -> int:
        registered = self._lookup(supporter)
        if registered is None:
            return 0
        # 價格固定，不隨持有數量變動
        return registered.cost

    def get_count(self, supporter: SupporterData) -> int:
        if supporter is None:
            return 0
        return self.counts.get(supporter.name, 0)

    def can_afford(self, supporter: SupporterData) -> bool:
        registered = self._lookup(supporter)
        if registered is None:
            return False
        return self.ledger.player_votes >= registered.cost

    def check_purchase(self, supporter: SupporterData) -> PurchaseResult:
        registered = self._lookup(supporter)
        if registered is None:
            return PurchaseResult.UNKNOWN_TYPE
        if self.counts[registered.name] >= registered.max_count:
            return PurchaseResult.AT_CAPACITY
        if not self.can_afford(registered):
            return PurchaseResult.INSUFFICIENT_FUNDS
        return PurchaseResult.OK

# --- 購買 ---
    def try_purchase(self, supporter: SupporterData) -> Tuple[bool, str]:
        result = self.check_purchase(supporter)

        if result == PurchaseResult.UNKNOWN_TYPE:
            name = supporter.name if supporter is not None else None
            return False, f"Unknown supporter: {name}"

        supporter = self.catalog[supporter.name]
        if result == PurchaseResult.AT_CAPACITY:
            if self.debug_mode: print(f"[支持者] {supporter.name} 已達上限")
            return False, f"Cannot buy anymore {supporter.name}! (max {supporter.max_count})"

        cost = self.get_cost(supporter)
        if result == PurchaseResult.INSUFFICIENT_FUNDS or not self.ledger.debit_player(cost):
            if self.debug_mode: print(f"[支持者] 票數不足: 需要 {cost}, 目前 {self.ledger.player_votes}")
            return False, f"Cannot afford {supporter.name}. Need: {cost}, Have: {self.ledger.player_votes}"

        self.counts[supporter.name] += 1
        count = self.counts[supporter.name]
        if self.debug_mode: print(f"[支持者] 購買 {supporter.name}, 數量 {count}, 剩餘票數 {self.ledger.player_votes}")
        return True, f"Bought {supporter.name}! Count: {count}, Votes: {self.ledger.player_votes}"

# --- 被動收入 ---
    def total_votes_per_second(self) -> int:
        total = 0
        for name, count in self.counts.items():
            total += self.catalog[name].votes_per_second * count
        return total

    def add_supporter_votes(self) -> int:
        amount = self.total_votes_per_second()
        self.ledger.credit_player(amount)
        return amount
