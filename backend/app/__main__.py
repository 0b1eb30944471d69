import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    # log_config=None keeps the JSON logging configured by app.main
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_config=None)
