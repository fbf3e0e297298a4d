"""Entry point for `python -m contract_forge`."""

import uvicorn

from .core.config import settings


def main():
    uvicorn.run(
        "contract_forge.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    main()
