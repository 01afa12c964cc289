"""Run the API with uvicorn: python -m fitlog"""
import uvicorn

from fitlog.core.config import settings


def main() -> None:
    uvicorn.run("fitlog.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
