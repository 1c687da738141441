from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field

class GameState(str, Enum):
    CONTINUE = "CONTINUE"
    WON = "WON"
    LOST = "LOST"

class PurchaseResult(str, Enum):
    OK = "OK"
    UNKNOWN_TYPE = "UNKNOWN_TYPE"
    AT_CAPACITY = "AT_CAPACITY"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"

class SupporterData(BaseModel):
    # 設定檔載入後不可修改；以 name 作為識別鍵
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    cost: int = Field(ge=0)
    votes_per_second: int = Field(ge=0)   # 每個支持者每秒帶來的票數
    max_count: int = Field(ge=0)

class SupporterView(BaseModel):
    name: str
    description: str
    cost: int
    votes_per_second: int
    count: int
    max_count: int
    affordable: bool

class GameSnapshot(BaseModel):
    total_votes: int
    player_votes: int
    opponent_votes: int
    state: GameState
    time_passed: int
    votes_per_second: int
    supporters: List[SupporterView] = []
