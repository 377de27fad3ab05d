from .step_10_probe_platform import ProbePlatformStep
from .step_20_resolve_runtime import ResolveRuntimeStep
from .step_30_resolve_framework import ResolveFrameworkStep
from .step_40_resolve_plugin import ResolvePluginStep
from .step_50_bootstrap_inference import BootstrapInferenceStep
from .step_60_configure_workspace import ConfigureWorkspaceStep
from .step_70_launch import LaunchStep

__all__ = [
    "ProbePlatformStep",
    "ResolveRuntimeStep",
    "ResolveFrameworkStep",
    "ResolvePluginStep",
    "BootstrapInferenceStep",
    "ConfigureWorkspaceStep",
    "LaunchStep",
]
