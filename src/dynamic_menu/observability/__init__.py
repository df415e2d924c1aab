"""OpenTelemetry instrumentation and observability utilities."""

from dynamic_menu.observability.config import configure_logging, setup_observability
from dynamic_menu.observability.decorators import traced

__all__ = ["setup_observability", "configure_logging", "traced"]
