"""
Tests for the Redis cache layer, using an in-memory fake client
"""

import fnmatch
import json

import redis

from redis_client import RedisClient, analysis_cache_key, escape_glob


class FakeRedis:
    """The subset of redis.Redis used by RedisClient"""

    def __init__(self, fail=False):
        self.store = {}
        self.ttls = {}
        self.fail = fail

    def _check(self):
        if self.fail:
            raise redis.ConnectionError("redis is down")

    def ping(self):
        self._check()
        return True

    def setex(self, key, ttl, value):
        self._check()
        self.store[key] = value
        self.ttls[key] = ttl
        return True

    def set(self, key, value):
        self._check()
        self.store[key] = value
        return True

    def get(self, key):
        self._check()
        return self.store.get(key)

    def delete(self, *keys):
        self._check()
        return sum(1 for key in keys if self.store.pop(key, None) is not None)

    def scan_iter(self, match=None, count=None):
        self._check()
        # Redis glob escapes use backslashes; fnmatch uses brackets
        pattern = match.replace("\\[", "[[]").replace("\\*", "[*]").replace("\\?", "[?]").replace("\\]", "]")
        return [key for key in list(self.store) if fnmatch.fnmatchcase(key, pattern)]

    def info(self):
        self._check()
        return {"connected_clients": 1, "used_memory_human": "1M", "total_commands_processed": 10}


def _client(fake=None):
    client = RedisClient.__new__(RedisClient)
    client.client = fake or FakeRedis()
    return client


def test_cache_keys():
    assert analysis_cache_key("https://a.test/", "home") == "cache:analysis:https://a.test/:home"
    assert analysis_cache_key("https://a.test/", "home", "abc") == "cache:analysis:https://a.test/:home:abc"


def test_escape_glob():
    assert escape_glob("https://a.test/?q=[1]*") == "https://a.test/\\?q=\\[1\\]\\*"


def test_cache_round_trip_uses_ttl():
    fake = FakeRedis()
    client = _client(fake)
    assert client.cache_analysis("https://a.test/", "home", {"overall_score": 42}, ttl=60)
    assert client.get_cached_analysis("https://a.test/", "home") == {"overall_score": 42}
    assert fake.ttls["cache:analysis:https://a.test/:home"] == 60


def test_content_digest_is_part_of_the_key():
    client = _client()
    client.cache_analysis("https://a.test/", "home", {"v": 1}, digest="aaa")
    assert client.get_cached_analysis("https://a.test/", "home", "aaa") == {"v": 1}
    assert client.get_cached_analysis("https://a.test/", "home", "bbb") is None
    assert client.get_cached_analysis("https://a.test/", "home") is None


def test_non_dict_cache_entries_are_ignored():
    fake = FakeRedis()
    fake.store["cache:analysis:https://a.test/:home"] = json.dumps([1, 2])
    assert _client(fake).get_cached_analysis("https://a.test/", "home") is None


def test_clear_analysis_cache_removes_every_variant():
    fake = FakeRedis()
    client = _client(fake)
    client.cache_analysis("https://a.test/", "home", {"v": 1})
    client.cache_analysis("https://a.test/", "about", {"v": 2}, digest="abc")
    client.cache_analysis("https://a.test/other", "home", {"v": 3})

    assert client.clear_analysis_cache("https://a.test/") == 2
    assert list(fake.store) == ["cache:analysis:https://a.test/other:home"]


def test_clear_analysis_cache_with_glob_characters_in_url():
    fake = FakeRedis()
    client = _client(fake)
    client.cache_analysis("https://a.test/?id=[1]", "home", {"v": 1}, digest="abc")
    client.cache_analysis("https://a.test/?id=1", "home", {"v": 2}, digest="abc")

    assert client.clear_analysis_cache("https://a.test/?id=[1]") == 1
    assert list(fake.store) == ["cache:analysis:https://a.test/?id=1:home:abc"]


def test_redis_failures_degrade_quietly():
    client = _client(FakeRedis(fail=True))
    assert client.ping() is False
    assert client.cache_analysis("https://a.test/", "home", {"v": 1}) is False
    assert client.get_cached_analysis("https://a.test/", "home") is None
    assert client.clear_analysis_cache("https://a.test/") == 0
    assert "error" in client.get_stats()
