# -*- coding: utf-8 -*-
"""
Telehealth Utility Module
"""

from .logger import get_logger, setup_logger, redact
from .helpers import is_blank, parse_iso_date, parse_time
