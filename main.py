import logging
import os

from fastapi import FastAPI
from handlers import rich_text_handler, string_arrays_handler
from pymongo import MongoClient
from lib.storage.string_arrays import StringArraysStorage

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="txt-span", description="Join text segments and attach annotation ranges")

app.include_router(rich_text_handler.router, prefix="/api")
app.include_router(string_arrays_handler.router, prefix="/api")

client = MongoClient(os.getenv("MONGODB_URL", "mongodb://localhost:8765/"))
string_arrays_storage = StringArraysStorage(client[os.getenv("MONGODB_DB", "txt_span")])
string_arrays_storage.prepare()
app.state.string_arrays_storage = string_arrays_storage

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
