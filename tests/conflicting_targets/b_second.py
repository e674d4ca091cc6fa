from autowire import auto_inject
from conflicting_targets.a_first import Cache


@auto_inject
class RedisCache(Cache):
    def get(self, key: str) -> object:
        return None
