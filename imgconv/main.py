"""Точка входа в приложение."""
import sys

from imgconv.app import ImageConverterApp


def main() -> None:
    """Создаёт приложение, выполняет команду и завершает процесс с её кодом."""
    app = ImageConverterApp()
    sys.exit(app.run(sys.argv[1:]))


if __name__ == "__main__":
    main()
