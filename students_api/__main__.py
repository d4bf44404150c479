import uvicorn

from .config import settings


def main():
    uvicorn.run("students_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
