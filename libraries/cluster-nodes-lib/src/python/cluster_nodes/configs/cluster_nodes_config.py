import logging
import yaml
from pathlib import Path
from typing import Optional
from injector import singleton

# From: libraries/cluster-nodes-lib/src/python/cluster_nodes/configs/cluster_nodes_config.py
# To:   libraries/cluster-nodes-lib/src/resources/configs/default.yaml
DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parents[3] / "resources" / "configs" / "default.yaml"

@singleton
class ClusterNodesConfig:

    def __init__(self, config_path: Optional[str | Path] = None):
        self.__logger = logging.getLogger(self.__class__.__name__)

        config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found at: {config_path}")

        with open(config_path, "r") as f:
            raw_config = yaml.safe_load(f) or {}

        console_config = raw_config.get("logcluster", {}).get("console", {})

        # Cluster settings
        cluster_config = console_config.get("cluster", {})
        self.transport_addresses: list[str] = list(cluster_config.get("transport_addresses", []) or [])
        self.refresh_interval: float = float(cluster_config.get("refresh_interval", 5.0))
        self.request_timeout: float = float(cluster_config.get("request_timeout", 10.0))

        self.config_path: Path = config_path
        self.__logger.info(f"ClusterNodesConfig loaded from {config_path} ({len(self.transport_addresses)} configured nodes)")
