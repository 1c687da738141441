import asyncio
from contextlib import asynccontextmanager, suppress
from datetime import datetime
from typing import List
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

import config
from core.models import GameSnapshot, PurchaseResult
from core.engine import GameEngine

# --- 全域變數 ---
engine = GameEngine.from_config()
game_logs: List[str] = []  # 儲存遊戲日誌

# --- 日誌輔助函式 ---
def log_event(message: str):
    time_str = datetime.now().strftime("%H:%M:%S")
    log_entry = f"[{time_str}] {message}"
    game_logs.insert(0, log_entry) # 最新訊息插在最前面
    if len(game_logs) > 100: # 只保留最近 100 筆
        game_logs.pop()

async def run_simulation():
    # 與請求處理共用同一個 event loop，所有狀態變更自然序列化
    loop = asyncio.get_running_loop()
    last = loop.time()
    while True:
        await asyncio.sleep(config.FRAME_SECONDS)
        now = loop.time()
        for msg in engine.step(now - last):
            log_event(msg)
        last = now

@asynccontextmanager
async def lifespan(app: FastAPI):
    task = None
    if config.AUTO_TICK:
        task = asyncio.create_task(run_simulation())
        log_event("=== 模擬開始 ===")
    yield
    if task:
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task

app = FastAPI(lifespan=lifespan)

# --- API Models ---
class BuyModel(BaseModel): supporter: str
class AdvanceModel(BaseModel): seconds: float = Field(ge=0, le=3600)  # 一次最多推進一小時

@app.get("/api/state", response_model=GameSnapshot)
async def get_state():
    return engine.snapshot()

@app.post("/api/click")
async def click_ballot_box():
    votes = engine.click()
    logs = engine.game_over_logs()
    for msg in logs:
        log_event(msg)
    return {"status": "success", "player_votes": votes, "state": engine.state}

@app.post("/api/buy")
async def buy_supporter(data: BuyModel):
    supporter = engine.supporters.resolve(data.supporter)
    if supporter is None: raise HTTPException(404, "Supporter not found")

    reason = engine.supporters.check_purchase(supporter)
    success, msg = engine.buy(data.supporter)
    if not success: raise HTTPException(400, {"reason": reason.value, "message": msg})

    log_event(msg)
    return {
        "status": "success",
        "reason": PurchaseResult.OK,
        "message": msg,
        "count": engine.supporters.get_count(supporter),
        "player_votes": engine.ledger.player_votes,
    }

# --- Admin 專用資料接口 ---
@app.get("/admin/data")
async def get_admin_data():
    return {
        "snapshot": engine.snapshot(),
        "ticks": engine.ticks,
        "logs": game_logs,
    }

@app.post("/admin/advance")
async def advance_time(data: AdvanceModel):
    for msg in engine.step(data.seconds):
        log_event(msg)
    return {"status": "success", "time_passed": engine.clock.time_passed, "state": engine.state}

@app.post("/admin/reset")
async def reset_game():
    global engine, game_logs
    engine = GameEngine.from_config()
    game_logs = []
    log_event("=== 遊戲已重置 ===")
    return {"status": "reset complete"}
