"""Entry point — `python -m streampay` serves the API with uvicorn.

Invariants:
    - Host, port and log level come from Settings (env / .env)
"""

import uvicorn

from streampay.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "streampay.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
