import os
import json
import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.responses import JSONResponse, HTMLResponse

from app.models.ticker import DisplayUpdate
from app.services.orchestrator import TickerOrchestrator

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s | %(levelname)s | cp2cripto | %(message)s"
)
log = logging.getLogger("cp2cripto")

app = FastAPI(title="CP2 Cripto", version="1.0")

orchestrator = TickerOrchestrator()

def _now():
    return datetime.now(timezone.utc).isoformat()

# ---------- HOME HTML embutido ----------
# A página guarda os dois slots (valor e data); cada clique é uma busca independente.
HOME_HTML = """<!doctype html>
<html lang="pt-br"><head>
<meta charset="utf-8"/><meta name="viewport" content="width=device-width,initial-scale=1"/>
<title>Bitcoin agora</title>
<style>
:root{--bg:#0b0f17;--card:#121824;--text:#e8eef9;--muted:#9db0cf;--border:#1b2433;--brand:#f7931a;--err:#ff5c5c}
*{box-sizing:border-box}body{margin:0;background:var(--bg);color:var(--text);font-family:system-ui,Segoe UI,Roboto,Arial}
.container{max-width:520px;margin:40px auto;padding:16px}
.card{background:var(--card);border:1px solid var(--border);border-radius:14px;padding:20px;text-align:center}
h1{margin:0 0 8px 0} .sub{color:var(--muted);margin:0 0 18px}
#value{font-size:36px;font-weight:700;margin:12px 0}
#date{color:var(--muted)}
button{padding:12px 14px;border-radius:10px;border:0;font-size:15px;background:var(--brand);color:#1a0f00;font-weight:700;cursor:pointer;margin-top:16px}
.toast{position:fixed;left:50%;bottom:24px;transform:translateX(-50%);background:var(--err);color:#fff;padding:10px 16px;border-radius:10px;display:none;cursor:pointer}
</style></head>
<body>
<div class="container">
  <h1>Cotação Bitcoin</h1>
  <p class="sub">Mercado Bitcoin • BTC/BRL</p>
  <div class="card">
    <div id="value">—</div>
    <div id="date">Atualizado em: —</div>
    <button id="btn" onclick="refresh()">Atualizar</button>
  </div>
</div>
<div id="toast" class="toast" onclick="dismiss()"></div>
<script>
let toastTimer;
function dismiss(){ document.getElementById('toast').style.display='none'; }
function notify(msg){
  const t=document.getElementById('toast'); t.textContent=msg; t.style.display='block';
  clearTimeout(toastTimer); toastTimer=setTimeout(dismiss, 3500);
}
async function refresh(){
  try{
    const r = await fetch('/api/ticker');
    const js = await r.json();
    if(js.error){ notify(js.error); return; }
    if(js.value!=null){ document.getElementById('value').textContent = js.value; }
    if(js.date!=null){ document.getElementById('date').textContent = 'Atualizado em: ' + js.date; }
  }catch(e){ notify(String(e)); }
}
</script>
</body></html>"""

# ---------- Rotas ----------
@app.get("/", response_class=HTMLResponse)
def home():
    return HTMLResponse(HOME_HTML)

@app.get("/health")
def health():
    return {"status": "ok", "time_utc": _now()}

@app.get("/api/ticker", response_model=DisplayUpdate)
async def api_ticker():
    update = await orchestrator.refresh()
    log.info("ticker: state=%s value=%s date=%s", update.state.value, update.value, update.date)
    return JSONResponse(json.loads(update.model_dump_json()))
