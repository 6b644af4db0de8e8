#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт импорта вопросов в каталог.

Выполняет:
1. Создание таблиц (если их ещё нет)
2. Валидацию записей из JSON-файла
3. Вставку новых и обновление существующих вопросов по ``id``

Использование::

    python scripts/seed_questions.py questions.json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from question_catalog.api.v1.questions.shared.schemas import \
    QuestionSeedSchema
from question_catalog.clients.database_client import (create_engine_from_settings,
                                                      create_session_factory,
                                                      init_db)
from question_catalog.config.logger import configure_logger
from question_catalog.config.settings import get_settings
from question_catalog.repository.questions import upsert_questions

logger = configure_logger()


def load_records(path: Path) -> List[Dict[str, Any]]:
    """Читает и валидирует записи вопросов из JSON-файла."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError("Ожидается JSON-массив вопросов")
    return [
        QuestionSeedSchema.model_validate(item).model_dump(mode="json")
        for item in raw
    ]


async def seed_questions(path: Path) -> None:
    """Импортирует вопросы из файла в базу данных."""
    records = load_records(path)
    logger.info(f"📦 Прочитано вопросов: {len(records)}")

    engine = create_engine_from_settings(get_settings())
    try:
        await init_db(engine)
        async with create_session_factory(engine)() as session:
            created, updated = await upsert_questions(session, records)
    finally:
        await engine.dispose()

    print(f"✅ Импорт завершён: создано {created}, обновлено {updated}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Импорт вопросов в каталог")
    parser.add_argument("path", type=Path, help="JSON-файл с массивом вопросов")
    args = parser.parse_args()

    try:
        asyncio.run(seed_questions(args.path))
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"Ошибка импорта вопросов: {e}")
        print(f"❌ Ошибка: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
