import logging
from typing import Optional
from injector import Injector
from cluster_nodes.configs import ClusterNodesConfig

def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s: [%(name)s] %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%SZ',
        handlers=[logging.StreamHandler()]
    )

def create_injector(config: Optional[ClusterNodesConfig] = None) -> Injector:
    """Build the dependency injector with `config` (or the default config file) bound."""
    config = config or ClusterNodesConfig()

    def configure_bindings(binder):
        binder.bind(ClusterNodesConfig, to=config)

    return Injector([configure_bindings])
