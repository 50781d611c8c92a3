import uvicorn

from chopchop.config import settings


def main() -> None:
    uvicorn.run("chopchop.main:app", host="0.0.0.0", port=settings.RELAY_PORT)


if __name__ == "__main__":
    main()
