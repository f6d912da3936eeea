from fastapi import FastAPI, HTTPException
from .models import EncodeRequest, EncodeResponse, HealthResponse
from .encode import encode_text

app = FastAPI(
    title="bytedump",
    description="ASCII byte dump of a single line of text",
    version="0.1.0",
)

@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/encode", response_model=EncodeResponse)
def encode(body: EncodeRequest):
    if "\n" in body.text or "\r" in body.text:
        raise HTTPException(status_code=422, detail="Only a single line of text is supported")

    return encode_text(body.text)
