import logging

import uvicorn

from persian_datetime.settings import load_settings
from persian_datetime.web_panel import create_app


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    uvicorn.run(app, host=settings.web_host, port=settings.web_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
