"""Run the Todo API with uvicorn: ``python -m api``."""

import uvicorn

from api.main import HOST, PORT

if __name__ == "__main__":
    uvicorn.run("api.main:app", host=HOST, port=PORT, log_config=None)
