"""SmartAgent installer (one-shot, idempotent bootstrap).

Core design goals:
- Detect before acting; every step is safe to re-run
- Ordered fallback strategies per dependency
- Self-healing of corrupted or impostor plugin installs
- Never overwrite user configuration
- Centralized logging
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
