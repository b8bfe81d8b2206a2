# backend/deps.py
from functools import lru_cache
from cheers.config import settings
from cheers.lookup import BrandChecker, build_checker


@lru_cache(maxsize=1)
def get_checker() -> BrandChecker:
    # construit une seule fois (catalogue + index fuzzy), partagé par les routes
    return build_checker(settings)
