"""``python -m feliz_tails``: serve the API with uvicorn on ``PORT``."""

import uvicorn

from feliz_tails.core.config import settings


def main() -> None:
    uvicorn.run(
        "feliz_tails.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
