import threading
import time

from managed_exceptions import TransportException
from cluster_nodes.models import FetchResult, SystemOverview
from cluster_nodes.nodes import UNKNOWN_HOSTNAME, CacheState
from cluster_nodes.nodes.system_info_cache import SystemInfoCache


def _overview(hostname="graylog-a", is_processing=True):
    return SystemOverview(hostname=hostname, is_processing=is_processing)


def test_two_reads_issue_one_fetch(api, node_factory, summary_factory):
    api.respond("GET", "/system", _overview())
    node = node_factory.from_summary(summary_factory())
    assert node.system_info_state is CacheState.EMPTY

    assert node.hostname == "graylog-a"
    assert node.is_processing is True

    assert api.count("GET", "/system") == 1
    assert node.system_info_state is CacheState.POPULATED


def test_failed_fetch_degrades_and_retries_next_time(api, node_factory, summary_factory):
    node = node_factory.from_summary(summary_factory())
    api.respond("GET", "/system", TransportException("connection refused"))

    assert node.hostname == UNKNOWN_HOSTNAME
    assert node.is_processing is False
    assert node.system_info_state is CacheState.EMPTY
    assert node.system_information().is_degraded

    api.respond("GET", "/system", _overview("graylog-b"))
    assert node.hostname == "graylog-b"
    assert node.system_info_state is CacheState.POPULATED


def test_reload_replaces_payload(api, node_factory, summary_factory):
    api.respond("GET", "/system", _overview("graylog-a"))
    node = node_factory.from_summary(summary_factory())
    assert node.hostname == "graylog-a"

    api.respond("GET", "/system", _overview("graylog-b", is_processing=False))
    result = node.load_system_information()

    assert result.is_success
    assert node.hostname == "graylog-b"
    assert node.is_processing is False
    assert api.count("GET", "/system") == 2


def test_failed_reload_keeps_previous_payload(api, node_factory, summary_factory):
    api.respond("GET", "/system", _overview("graylog-a"))
    node = node_factory.from_summary(summary_factory())
    assert node.hostname == "graylog-a"

    api.respond("GET", "/system", TransportException("timed out"))
    result = node.load_system_information()

    assert result.is_degraded
    assert node.hostname == "graylog-a"
    assert node.system_info_state is CacheState.POPULATED


def test_concurrent_first_access_fetches_once():
    cache = SystemInfoCache()
    calls = []
    calls_lock = threading.Lock()

    def loader():
        with calls_lock:
            calls.append(1)
        time.sleep(0.05)
        return FetchResult.fetched(_overview())

    barrier = threading.Barrier(8)
    results = []

    def read():
        barrier.wait()
        results.append(cache.get_or_load(loader))

    threads = [threading.Thread(target=read) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(result.value.hostname == "graylog-a" for result in results)


def test_failed_first_fetch_leaves_cache_empty():
    cache = SystemInfoCache()
    result = cache.get_or_load(lambda: FetchResult.degraded("connection refused"))
    assert result.is_degraded
    assert cache.state is CacheState.EMPTY

    result = cache.get_or_load(lambda: FetchResult.fetched(_overview("graylog-c")))
    assert result.value.hostname == "graylog-c"
    assert cache.state is CacheState.POPULATED
