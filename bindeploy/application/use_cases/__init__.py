"""
Application Use Cases Package

Architectural Intent:
- Remote Transport, Activator and the Deploy Orchestrator built on top
  of domain services and ports
"""

from bindeploy.application.use_cases.transfer_artifact import TransferArtifact
from bindeploy.application.use_cases.activate_version import ActivateVersion
from bindeploy.application.use_cases.deploy_binary import DeployBinary

__all__ = ["TransferArtifact", "ActivateVersion", "DeployBinary"]
