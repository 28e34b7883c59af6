import time

import pytest
from prometheus_client import REGISTRY

from cluster_nodes.configs import ClusterNodesConfig
from cluster_nodes.models import NodeSummaryList
from cluster_nodes.services import ClusterNodesService, NodeRefreshService

FIRST = "http://10.0.0.1:9000"
SECOND = "http://10.0.0.2:9000"
THIRD = "http://10.0.0.3:9000"


@pytest.fixture
def config(config_file):
    return ClusterNodesConfig(config_file)


@pytest.fixture
def cluster(config, node_factory):
    return ClusterNodesService(config, node_factory)


@pytest.fixture
def refresher(config, cluster, node_factory, api):
    service = NodeRefreshService(config, cluster, node_factory, api)
    yield service
    service.stop()


def _by_address(cluster):
    return {str(node.transport_address): node for node in cluster.all()}


def test_successful_contact_resolves_and_touches(api, cluster, refresher, summary_factory):
    node = _by_address(cluster)[FIRST]
    api.respond("GET", "/system/cluster/node", summary_factory(node_id="n1", transport_address=FIRST), host=FIRST)

    assert refresher.probe(node) is True
    assert node.node_id == "n1"
    assert node.is_master is True
    assert node.is_active() is True
    assert node.last_contact is not None
    assert node.failure_count == 0


def test_unreachable_node_is_marked_failed(cluster, refresher):
    node = _by_address(cluster)[SECOND]
    node.touch()

    assert refresher.probe(node) is False
    assert node.is_active() is False
    assert node.failure_count == 1
    assert node.node_id is None


def test_discover_without_active_node_is_skipped(api, refresher):
    assert refresher.discover() == []
    assert api.count("GET", "/system/cluster/nodes") == 0


def test_refresh_rounds_discover_then_contact_each_node(api, cluster, refresher, summary_factory):
    api.respond("GET", "/system/cluster/node", summary_factory(node_id="n1", transport_address=FIRST), host=FIRST)
    api.respond("GET", "/system/cluster/node", summary_factory(node_id="n3", transport_address=THIRD, is_master=False), host=THIRD)
    api.respond("GET", "/system/cluster/nodes", NodeSummaryList(nodes=[
        summary_factory(node_id="n1", transport_address=FIRST),
        summary_factory(node_id="n2", transport_address=SECOND, is_master=False),
        summary_factory(node_id="n3", transport_address=THIRD, is_master=False),
    ], total=3), host=FIRST)

    refresher.refresh()
    nodes = _by_address(cluster)
    assert set(nodes) == {FIRST, SECOND}
    assert nodes[FIRST].node_id == "n1"
    assert nodes[FIRST].is_active() is True
    assert nodes[SECOND].is_active() is False

    refresher.refresh()
    nodes = _by_address(cluster)
    assert set(nodes) == {FIRST, SECOND, THIRD}
    # The listing resolves the configured record, but its own probe still fails.
    assert nodes[SECOND].node_id == "n2"
    assert nodes[SECOND].is_active() is False
    assert nodes[SECOND].failure_count == 2
    assert nodes[THIRD].is_active() is True
    assert nodes[THIRD].is_from_configuration is False
    assert cluster.master() is nodes[FIRST]

    assert REGISTRY.get_sample_value("lcc_cluster_nodes", {"state": "active"}) == 2
    assert REGISTRY.get_sample_value("lcc_cluster_nodes", {"state": "inactive"}) == 1


def test_discovery_listing_failure_keeps_registry(api, cluster, refresher, summary_factory):
    api.respond("GET", "/system/cluster/node", summary_factory(node_id="n1", transport_address=FIRST), host=FIRST)
    refresher.refresh()
    refresher.refresh()
    assert len(cluster.all()) == 2
    assert api.count("GET", "/system/cluster/nodes") == 1


def test_start_and_stop(api, refresher, summary_factory):
    api.respond("GET", "/system/cluster/node", summary_factory(node_id="n1", transport_address=FIRST), host=FIRST)
    refresher.start()
    assert refresher.is_running is True

    deadline = time.monotonic() + 5.0
    while api.count("GET", "/system/cluster/node") < 4 and time.monotonic() < deadline:
        time.sleep(0.01)

    refresher.stop()
    assert refresher.is_running is False
    assert api.count("GET", "/system/cluster/node") >= 4


def test_malformed_listing_entry_does_not_stop_liveness_checks(api, cluster, refresher, summary_factory):
    api.respond("GET", "/system/cluster/node", summary_factory(node_id="n1", transport_address=FIRST), host=FIRST)
    api.respond("GET", "/system/cluster/node", summary_factory(node_id="n3", transport_address=THIRD, is_master=False), host=THIRD)
    api.respond("GET", "/system/cluster/nodes", NodeSummaryList(nodes=[
        summary_factory(node_id="n1", transport_address=FIRST),
        summary_factory(node_id="n9", transport_address="not-a-uri", is_master=False),
        summary_factory(node_id="n3", transport_address=THIRD, is_master=False),
    ], total=3), host=FIRST)
    refresher.refresh()

    refresher.refresh()

    nodes = _by_address(cluster)
    assert set(nodes) == {FIRST, SECOND, THIRD}
    assert cluster.find("n9") is None
    assert nodes[SECOND].failure_count == 2
    assert nodes[SECOND].is_active() is False
    assert nodes[THIRD].is_active() is True
    assert api.count("GET", "/system/cluster/node") == 5
    assert REGISTRY.get_sample_value("lcc_cluster_nodes", {"state": "active"}) == 2
    assert REGISTRY.get_sample_value("lcc_cluster_nodes", {"state": "inactive"}) == 1


def test_unusable_summary_counts_as_failed_contact(api, cluster, refresher, summary_factory):
    node = _by_address(cluster)[FIRST]
    node.touch()
    api.respond("GET", "/system/cluster/node", summary_factory(node_id="n1", transport_address="not-a-uri"), host=FIRST)

    assert refresher.probe(node) is False
    assert node.is_active() is False
    assert node.failure_count == 1
    assert node.node_id is None
