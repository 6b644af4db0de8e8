# -*- coding: utf-8 -*-
"""
Запуск сервера: ``python -m question_catalog``.
"""

import uvicorn

from question_catalog.config.settings import get_settings
from question_catalog.config.uvicorn_config import get_uvicorn_config


def main():
    uvicorn.run(**get_uvicorn_config(get_settings()))


if __name__ == "__main__":
    main()
