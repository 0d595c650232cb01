# -*- coding: utf-8 -*-
"""
Telehealth Application Core Module
"""

from .config import Config

__all__ = ["Config"]
