import uvicorn

from molo.core.config import settings


def main():
    uvicorn.run(
        "molo.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG
    )


if __name__ == "__main__":
    main()
