"""Run the API with uvicorn: `python -m chirpy_api`."""

import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run("chirpy_api.main:app", host="0.0.0.0", port=8080, reload=settings.debug)


if __name__ == "__main__":
    main()
