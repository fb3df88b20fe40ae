from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pathlib import Path
import os

app = FastAPI(title="Mock Receipt Server", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/receipt_stub") if os.path.exists("/receipt_stub") else Path(__file__).resolve().parent / "receipt_stub"

# Smallest document most PDF viewers will open
_BLANK_PDF = (
    b"%PDF-1.4\n1 0 obj<</Type/Catalog/Pages 2 0 R>>endobj\n"
    b"2 0 obj<</Type/Pages/Kids[3 0 R]/Count 1>>endobj\n"
    b"3 0 obj<</Type/Page/Parent 2 0 R/MediaBox[0 0 200 200]>>endobj\n"
    b"trailer<</Root 1 0 R>>\n%%EOF\n"
)

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/api/receipt/{payment_id}")
def get_receipt(payment_id: str):
    if payment_id.startswith("missing"):
        raise HTTPException(status_code=404, detail="receipt not found")
    file = DATA_DIR / f"{payment_id}.pdf"
    content = file.read_bytes() if file.is_file() else _BLANK_PDF
    return Response(content=content, media_type="application/pdf")
