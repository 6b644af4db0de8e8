# -*- coding: utf-8 -*-
"""
Question Catalog - сервис каталога задач для практики с отметками прогресса.
"""

__version__ = "0.1.0"
