"""Точка входа в приложение."""
import logging

from hex2bmp.app import Hex2BmpApp
from hex2bmp.config import load_config


def main() -> None:
    """Настраивает логирование, создаёт и запускает главное окно приложения."""
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = Hex2BmpApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
