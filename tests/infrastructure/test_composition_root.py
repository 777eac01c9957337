"""Tests for composition root DI container."""

from bindeploy.composition_root import BindeployContainer, create_container
from bindeploy.infrastructure.config import (
    ActivationConfig,
    DeployConfig,
    HashingConfig,
    SSHConfig,
)


class TestCompositionRoot:
    def test_create_container(self):
        container = create_container()

        assert isinstance(container, BindeployContainer)
        assert container.fabric_adapter is not None
        assert container.git_adapter is not None
        assert container.event_bus is not None
        assert container.deploy_binary is not None
        assert container.telemetry.initialized is False

    def test_deploy_binary_wiring(self):
        container = create_container()

        deploy = container.deploy_binary
        assert deploy.hasher is container.hasher
        assert deploy.source_control is container.git_adapter
        assert deploy.namer is container.namer
        assert deploy.transfer is container.transfer
        assert deploy.activate is container.activate
        assert deploy.event_bus is container.event_bus
        assert container.transfer.remote_shell is container.fabric_adapter
        assert container.activate.remote_shell is container.fabric_adapter

    def test_config_flows_into_components(self, tmp_path):
        config = DeployConfig(
            hashing=HashingConfig(algorithm="blake2b", chunk_size=4096),
            ssh=SSHConfig(connect_timeout=7, forward_agent=True),
            activation=ActivationConfig(strategy="rename"),
        )
        container = create_container(config, repo_path=tmp_path)

        assert container.config is config
        assert container.hasher.algorithm == "blake2b"
        assert container.hasher.chunk_size == 4096
        assert container.fabric_adapter.connect_timeout == 7
        assert container.fabric_adapter.forward_agent is True
        assert container.activate.strategy == "rename"
        assert container.git_adapter.repo_path == tmp_path
