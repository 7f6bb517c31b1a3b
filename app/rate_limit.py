"""Rate Limiter (schützt vor Fehlbedienung und Passwort-Raten)"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import settings

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
