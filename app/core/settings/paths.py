"""
Выбор файла переменных окружения.

Порядок:
1. ENVIRONMENT (test / development / остальное = production)
2. ENV_FILE (явный путь)
3. .env.dev, если он есть в текущей директории
4. .env
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_FILES = {
    "test": Path(".env.test"),
    "development": Path(".env.dev"),
    "production": Path(".env"),
}


class PathSettings:
    """Определение окружения и пути к его env-файлу."""

    @staticmethod
    def get_env_file_and_type() -> tuple[Path, str]:
        """
        Возвращает путь к env-файлу и тип окружения.

        Returns:
            tuple[Path, str]: Путь к файлу и тип (test, development, production, custom)

        Example:
            >>> os.environ["ENVIRONMENT"] = "test"
            >>> PathSettings.get_env_file_and_type()
            (PosixPath('.env.test'), 'test')
        """
        environment = os.getenv("ENVIRONMENT", "").lower()
        env_file = os.getenv("ENV_FILE")

        if environment:
            env_type = environment if environment in ENV_FILES else "production"
            env_path = ENV_FILES[env_type]
        elif env_file:
            env_path = Path(env_file)
            env_type = "test" if ".env.test" in str(env_path) else "custom"
        elif ENV_FILES["development"].exists():
            env_type = "development"
            env_path = ENV_FILES[env_type]
        else:
            env_type = "production"
            env_path = ENV_FILES[env_type]

        logger.info("Запуск в режиме: %s (конфигурация: %s)", env_type.upper(), env_path)
        return env_path, env_type
