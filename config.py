import json
import random
import os
from typing import List, Optional

from core.models import SupporterData

# 取得目前檔案所在的目錄位置，確保能正確讀取 json
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
JSON_PATH = os.environ.get("VOTE_CLICKER_DATA", os.path.join(BASE_DIR, "data.json"))


def load_game_data(path: str = JSON_PATH) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def build_supporters(raw: List[dict]) -> List[SupporterData]:
    # 同名的支持者視為同一種類，只保留第一筆
    supporters: List[SupporterData] = []
    seen = set()
    for entry in raw:
        supporter = SupporterData(**entry)
        if supporter.name in seen:
            continue
        seen.add(supporter.name)
        supporters.append(supporter)
    return supporters


data = load_game_data()

# --- 讀取基礎設定 ---
settings = data["game_settings"]
TOTAL_VOTES = settings["total_votes"]
CLICK_VOTES = settings.get("click_votes", 1)
TICK_INTERVAL = settings.get("tick_interval", 1.0)
FIRST_TICK_DELAY = settings.get("first_tick_delay", TICK_INTERVAL)
FRAME_SECONDS = settings.get("frame_seconds", 0.1)
AUTO_TICK = settings.get("auto_tick", True)
DEBUG_MODE = settings.get("debug_mode", False)
RNG_SEED: Optional[int] = settings.get("rng_seed")

# JSON 沒有 tuple，需在此轉換；上限不包含在內 [lo, hi)
OPPONENT_VOTE_RANGE = tuple(settings.get("opponent_vote_range", [7, 15]))

# --- 讀取支持者目錄 ---
SUPPORTERS = build_supporters(data["supporters"])


# --- 輔助函式 ---
def make_rng() -> random.Random:
    return random.Random(RNG_SEED)
